from fastapi.middleware.cors import CORSMiddleware
from fastapi import FastAPI
from .config import settings


def setup_cors(app: FastAPI) -> None:
    # клієнт лише читає стан і надсилає сигнали: PUT не потрібен
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.FRONTEND_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type"],
        max_age=3600,
    )
