import json
import time
from typing import Callable, Dict, Optional, Protocol, Tuple

from redis.asyncio import Redis
from redis.exceptions import WatchError

from ..domain.errors import ConcurrentUpdateError

REDIS_PREFIX = "quiz:session:"


def stored_version(raw: Optional[str]) -> Optional[int]:
    if not raw:
        return None
    return int(json.loads(raw).get("version", 0))


class SessionStore(Protocol):
    async def get(self, session_id: str) -> Optional[dict]: ...

    async def save(
        self,
        session_id: str,
        record: dict,
        expected_version: Optional[int] = None,
    ) -> None: ...

    async def delete(self, session_id: str) -> bool: ...


class InMemorySessionStore:
    """
    Сховище сесій у пам'яті процесу (за замовчуванням, без Redis).

    Записи живуть ttl_seconds від останнього збереження, як і ключі в Redis.
    Прострочені записи видаляються при читанні та при кожному збереженні.
    """

    def __init__(self, ttl_seconds: int, clock: Callable[[], float] = time.monotonic) -> None:
        self.ttl_seconds = ttl_seconds
        self.clock = clock
        self._records: Dict[str, Tuple[float, str]] = {}

    def _live(self, session_id: str) -> Optional[str]:
        entry = self._records.get(session_id)
        if entry is None:
            return None
        expires_at, raw = entry
        if expires_at <= self.clock():
            del self._records[session_id]
            return None
        return raw

    def _purge(self) -> None:
        now = self.clock()
        expired = [sid for sid, (expires_at, _) in self._records.items() if expires_at <= now]
        for sid in expired:
            del self._records[sid]

    def __len__(self) -> int:
        return len(self._records)

    async def get(self, session_id: str) -> Optional[dict]:
        raw = self._live(session_id)
        return json.loads(raw) if raw else None

    async def save(
        self,
        session_id: str,
        record: dict,
        expected_version: Optional[int] = None,
    ) -> None:
        self._purge()
        # перевірка і запис без await між ними — атомарно в межах event loop
        if expected_version is not None and stored_version(self._live(session_id)) != expected_version:
            raise ConcurrentUpdateError(session_id)
        # зберігаємо JSON, щоб поведінка збігалась з Redis (без спільних посилань)
        self._records[session_id] = (self.clock() + self.ttl_seconds, json.dumps(record))

    async def delete(self, session_id: str) -> bool:
        return self._records.pop(session_id, None) is not None


class RedisSessionStore:
    def __init__(self, r: Redis, ttl_seconds: int) -> None:
        self.r = r
        self.ttl_seconds = ttl_seconds

    def k_session(self, session_id: str) -> str:
        return f"{REDIS_PREFIX}{session_id}"

    async def get(self, session_id: str) -> Optional[dict]:
        raw = await self.r.get(self.k_session(session_id))
        return json.loads(raw) if raw else None

    async def save(
        self,
        session_id: str,
        record: dict,
        expected_version: Optional[int] = None,
    ) -> None:
        key = self.k_session(session_id)
        data = json.dumps(record)

        # TTL оновлюється при кожному збереженні
        if expected_version is None:
            await self.r.set(key, data, ex=self.ttl_seconds)
            return

        # оптимістичне блокування: WATCH + MULTI, версія має збігатися з прочитаною
        try:
            async with self.r.pipeline(transaction=True) as pipe:
                await pipe.watch(key)
                if stored_version(await pipe.get(key)) != expected_version:
                    raise ConcurrentUpdateError(session_id)
                pipe.multi()
                pipe.set(key, data, ex=self.ttl_seconds)
                await pipe.execute()
        except WatchError as e:
            raise ConcurrentUpdateError(session_id) from e

    async def delete(self, session_id: str) -> bool:
        removed = await self.r.delete(self.k_session(session_id))
        return bool(removed)
