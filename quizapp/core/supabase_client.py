from supabase import create_client, Client
from supabase.client import ClientOptions
from .config import settings

_supabase: Client | None = None


def get_supabase() -> Client | None:
    """Клієнт Supabase або None, якщо банк вікторин не налаштований."""
    global _supabase
    if not settings.supabase_enabled:
        return None
    if _supabase is None:
        # ВАЖЛИВО: каст до str
        _supabase = create_client(
            str(settings.SUPABASE_URL),
            str(settings.SUPABASE_SERVICE_ROLE_KEY),
            options=ClientOptions(schema=settings.SUPABASE_SCHEMA),
        )
    return _supabase
