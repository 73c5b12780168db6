import uuid
import logging
from datetime import datetime
from typing import Optional, Type, TypeVar

import httpx
from postgrest.exceptions import APIError
from pydantic import ValidationError
from supabase import AsyncClient

from app.core.errors import StoreError
from app.schemas.account import StorageFacility, StorageProfile, UserProfile
from app.schemas.booking import Booking, BookingCreate, Document

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Document)

BOOKINGS = "bookings"
STORAGES = "storages"
USERS = "users"


class SupabaseDocumentStore:
    """
    Typed access to the bookings, storages and users tables.

    Rows are validated into schema models on the way out, so callers never
    see raw dicts. Client failures and malformed rows both surface as StoreError.
    """

    def __init__(self, client: AsyncClient):
        self.client = client

    async def _get(self, table: str, doc_id: str, model: Type[T]) -> Optional[T]:
        try:
            result = await self.client.table(table).select("*").eq("id", doc_id).execute()
        except (APIError, httpx.HTTPError) as e:
            raise StoreError(f"Error reading {table}/{doc_id}: {e}") from e
        if not result.data:
            return None
        try:
            return model.model_validate(result.data[0])
        except ValidationError as e:
            raise StoreError(f"Malformed document {table}/{doc_id}: {e}") from e

    async def _upsert(self, table: str, doc: dict) -> None:
        try:
            await self.client.table(table).upsert(doc).execute()
        except (APIError, httpx.HTTPError) as e:
            raise StoreError(f"Error writing {table}/{doc.get('id')}: {e}") from e

    async def get_storage(self, storage_id: str) -> Optional[StorageFacility]:
        return await self._get(STORAGES, storage_id, StorageFacility)

    async def get_storage_profile(self, storage_id: str) -> Optional[StorageProfile]:
        return await self._get(STORAGES, storage_id, StorageProfile)

    async def set_storage(self, storage: StorageProfile) -> None:
        doc = storage.model_dump(mode="json", by_alias=True, exclude_none=True, exclude={"is_storage"})
        await self._upsert(STORAGES, doc)

    async def get_user(self, user_id: str) -> Optional[UserProfile]:
        return await self._get(USERS, user_id, UserProfile)

    async def set_user(self, user: UserProfile) -> None:
        await self._upsert(USERS, user.to_document())

    async def get_booking(self, booking_id: str) -> Optional[Booking]:
        return await self._get(BOOKINGS, booking_id, Booking)

    async def add_booking(self, booking: BookingCreate) -> str:
        booking_id = str(uuid.uuid4())
        doc = booking.to_document()
        doc["id"] = booking_id
        try:
            await self.client.table(BOOKINGS).insert(doc).execute()
        except (APIError, httpx.HTTPError) as e:
            raise StoreError(f"Error adding booking: {e}") from e
        logger.info(f"Booking {booking_id} stored for order {booking.order_id}")
        return booking_id

    async def mark_booking_paid(self, booking_id: str, paid_at: datetime) -> None:
        try:
            await (
                self.client.table(BOOKINGS)
                .update({"paid": True, "paidAt": paid_at.isoformat()})
                .eq("id", booking_id)
                .execute()
            )
        except (APIError, httpx.HTTPError) as e:
            raise StoreError(f"Error updating booking {booking_id}: {e}") from e
