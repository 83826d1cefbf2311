from typing import Annotated

from fastapi import Depends

from ...core.config import settings
from ...core.redis_manager import get_redis
from ...core.supabase_client import get_supabase
from ...repositories.quiz_repository import QuizRepository
from ...repositories.session_store import InMemorySessionStore, RedisSessionStore, SessionStore
from ...services.quiz_service import QuizService

# сесії без Redis живуть у пам'яті процесу
_memory_store = InMemorySessionStore(settings.SESSION_TTL_SECONDS)


async def get_store() -> SessionStore:
    if settings.REDIS_URL:
        return RedisSessionStore(await get_redis(), settings.SESSION_TTL_SECONDS)
    return _memory_store


# Dependency фабрика сервісу

async def get_service(store: Annotated[SessionStore, Depends(get_store)]) -> QuizService:
    client = get_supabase()
    repo = QuizRepository(client) if client is not None else None
    return QuizService(store, repo=repo, splash_delay_ms=settings.SPLASH_DELAY_MS)


ServiceDep = Annotated[QuizService, Depends(get_service)]
