import uvicorn

from .core.config import settings


def main() -> None:
    uvicorn.run("quizapp.main:app", host="0.0.0.0", port=settings.BACKEND_PORT)


if __name__ == "__main__":
    main()
