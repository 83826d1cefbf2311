import logging

from redis.asyncio import Redis
from quizapp.core.config import settings

logger = logging.getLogger(__name__)

_redis: Redis | None = None


async def get_redis() -> Redis:
    """
    Повертає singleton-клієнт Redis для сховища сесій. Підтримує TLS через
    схему rediss:// та налаштований для керованих хмарних провайдерів.
    """
    global _redis
    if _redis is None:
        if not settings.REDIS_URL:
            raise RuntimeError("REDIS_URL is not configured")
        _redis = Redis.from_url(
            settings.REDIS_URL,
            decode_responses=True,
            health_check_interval=30,     # періодичний PING для підтримки з'єднання
            socket_timeout=3,             # таймаут на команду
            socket_connect_timeout=3,     # таймаут на конект
            retry_on_timeout=True,
            max_connections=50,
        )
        # Перевірка доступності на старті
        await _redis.ping()
        logger.info("Підключено Redis для сесій")
    return _redis


async def close_redis() -> None:
    global _redis
    if _redis is not None:
        await _redis.close()
        _redis = None
