import hashlib
import hmac
from datetime import datetime, timezone
from typing import Optional

import pytest
import razorpay
from razorpay.errors import ServerError

from app.schemas.account import StorageFacility, StorageProfile, UserProfile
from app.schemas.booking import Booking, BookingCreate
from app.services.booking_service import BookingService
from app.services.razorpay_gateway import RazorpayGateway

KEY_ID = "rzp_test_key"
SECRET = "s3cr3t"
FIXED_NOW = datetime(2026, 1, 5, 9, 30, tzinfo=timezone.utc)


class FakeStore:
    """In-memory stand-in for SupabaseDocumentStore holding raw documents."""

    def __init__(self):
        self.storages = {}
        self.users = {}
        self.bookings = {}
        self.paid_updates = []
        self._next_id = 0

    async def get_storage(self, storage_id: str) -> Optional[StorageFacility]:
        doc = self.storages.get(storage_id)
        return StorageFacility.model_validate(doc) if doc else None

    async def get_storage_profile(self, storage_id: str) -> Optional[StorageProfile]:
        doc = self.storages.get(storage_id)
        return StorageProfile.model_validate(doc) if doc else None

    async def set_storage(self, storage: StorageProfile) -> None:
        self.storages[storage.id] = storage.model_dump(mode="json", by_alias=True, exclude={"is_storage"})

    async def get_user(self, user_id: str) -> Optional[UserProfile]:
        doc = self.users.get(user_id)
        return UserProfile.model_validate(doc) if doc else None

    async def set_user(self, user: UserProfile) -> None:
        self.users[user.id] = user.to_document()

    async def get_booking(self, booking_id: str) -> Optional[Booking]:
        doc = self.bookings.get(booking_id)
        return Booking.model_validate(doc) if doc else None

    async def add_booking(self, booking: BookingCreate) -> str:
        self._next_id += 1
        booking_id = f"booking_{self._next_id}"
        doc = booking.to_document()
        doc["id"] = booking_id
        self.bookings[booking_id] = doc
        return booking_id

    async def mark_booking_paid(self, booking_id: str, paid_at: datetime) -> None:
        self.paid_updates.append(booking_id)
        self.bookings[booking_id].update({"paid": True, "paidAt": paid_at.isoformat()})


def sign(order_id: str, payment_id: str, secret: str = SECRET) -> str:
    """Signature Razorpay Checkout hands back for a completed payment."""
    return hmac.new(secret.encode(), f"{order_id}|{payment_id}".encode(), hashlib.sha256).hexdigest()


class FakeOrders:
    """Replaces `razorpay.Client.order` so no request leaves the process."""

    def __init__(self, order_id: str = "order_abc"):
        self.order_id = order_id
        self.calls = []
        self.error: Optional[Exception] = None

    def create(self, data=None, **kwargs):
        self.calls.append(data)
        if self.error is not None:
            raise self.error
        return {"id": self.order_id, "entity": "order", "amount": data["amount"], "status": "created"}


@pytest.fixture
def store():
    store = FakeStore()
    store.storages["storage_1"] = {
        "id": "storage_1",
        "name": "Koramangala Self Storage",
        "phone": "9876543210",
        "address": "12 80 Feet Road, Bengaluru",
        "images": ["https://cdn.example.com/storage_1/front.jpg", "https://cdn.example.com/storage_1/inside.jpg"],
        "aadhar": "1234 5678 9012",
        "pan": "ABCDE1234F",
    }
    return store


@pytest.fixture
def orders():
    return FakeOrders()


@pytest.fixture
def razorpay_client(orders):
    client = razorpay.Client(auth=(KEY_ID, SECRET))
    client.order = orders
    return client


@pytest.fixture
def gateway(razorpay_client):
    return RazorpayGateway(KEY_ID, SECRET, client=razorpay_client)


@pytest.fixture
def failing_gateway(orders, gateway):
    orders.error = ServerError("upstream unavailable")
    return gateway


@pytest.fixture
def service(store, gateway):
    return BookingService(store, gateway, clock=lambda: FIXED_NOW)
