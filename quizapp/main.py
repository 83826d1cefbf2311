from contextlib import asynccontextmanager

from fastapi import FastAPI
from .core.config import settings
from .core.cors import setup_cors
from .core.logging_config import configure_logging
from .core.redis_manager import close_redis
from .api.v1.routers import quizzes as quizzes_router
from .api.v1.routers import sessions as sessions_router

configure_logging(settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_redis()


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
setup_cors(app)

app.include_router(quizzes_router.router, prefix=settings.API_V1_PREFIX)
app.include_router(sessions_router.router, prefix=settings.API_V1_PREFIX)


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}
