import logging
from typing import Optional
from supabase import create_async_client, AsyncClient
from app.core.config import settings

logger = logging.getLogger(__name__)

class SupabaseManager:
    """
    Lazily creates the Supabase clients backing the document store.
    bookings, storages and users are plain tables keyed by `id`.
    """
    client: Optional[AsyncClient] = None
    service_client: Optional[AsyncClient] = None

    @staticmethod
    async def _create(key: Optional[str]) -> AsyncClient:
        url: str = settings.SUPABASE_URL
        if not url or not key:
            raise ValueError("Supabase URL and Key must be provided in the environment variables.")
        return await create_async_client(url, key)

    @classmethod
    async def get_client(cls) -> AsyncClient:
        if cls.client is None:
            cls.client = await cls._create(settings.SUPABASE_KEY)
        return cls.client

    @classmethod
    async def get_service_client(cls) -> AsyncClient:
        """
        Returns a client using the Service Role Key if available, so that
        booking writes are not subject to RLS. Falls back to SUPABASE_KEY.
        """
        if cls.service_client is None:
            if not settings.SUPABASE_SERVICE_ROLE_KEY:
                logger.warning("SUPABASE_SERVICE_ROLE_KEY not found. Falling back to standard SUPABASE_KEY. RLS might block access.")
                return await cls.get_client()
            logger.info("Initializing Supabase client with Service Role Key.")
            cls.service_client = await cls._create(settings.SUPABASE_SERVICE_ROLE_KEY)
        return cls.service_client

    @classmethod
    def reset(cls) -> None:
        cls.client = None
        cls.service_client = None

db = SupabaseManager()
