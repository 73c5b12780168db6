import uuid
import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict

from app.core.errors import NotFound, PaymentVerificationFailed
from app.schemas.account import StorageFacility
from app.schemas.booking import Booking, BookingCreate

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BookingService:
    """
    Creates pending bookings against a payment order and marks them paid once
    the gateway's checkout signature checks out.

    The store and gateway are passed in; the gateway holds the signing
    secret. Nothing is read from module-level singletons.
    """

    def __init__(
        self,
        store,
        gateway,
        currency: str = "INR",
        require_order_match: bool = False,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.store = store
        self.gateway = gateway
        self.currency = currency
        self.require_order_match = require_order_match
        self.clock = clock

    async def create_booking(
        self,
        user_id: str,
        storage_id: str,
        boxes: int,
        amount: int,
        storage_type: str,
        duration: int,
        user_name: str,
    ) -> Dict[str, str]:
        """
        Reserve `boxes` at a storage facility for `duration` weeks.

        Returns the gateway order id the client pays against and the new
        booking id. The booking starts unpaid.
        """
        try:
            storage = await self._get_storage(storage_id)
            order_id = await self.gateway.create_order(amount, self.currency, uuid.uuid4().hex)
            booking = self._build_booking(
                user_id, storage, user_name, boxes, amount, storage_type, order_id, duration
            )
            booking_id = await self.store.add_booking(booking)
            return {"orderId": order_id, "bookingId": booking_id}
        except Exception as e:
            logger.error(f"[BOOKING: CREATE BOOKING] {e}")
            raise

    async def verify_booking(
        self,
        payment_id: str,
        order_id: str,
        signature: str,
        booking_id: str,
    ) -> Dict[str, str]:
        try:
            booking = await self._get_booking(booking_id, "Order not found, please try again")

            self.gateway.verify_payment_signature(order_id, payment_id, signature)

            if order_id != booking.order_id:
                if self.require_order_match:
                    raise PaymentVerificationFailed("Payment verification failed")
                logger.warning(
                    f"Booking {booking_id} verified with order {order_id}, expected {booking.order_id}"
                )

            if booking.paid:
                logger.info(f"Booking {booking_id} already paid at {booking.paid_at}")
            else:
                await self.store.mark_booking_paid(booking_id, self.clock())
                logger.info(f"Booking {booking_id} paid with {payment_id}")
            return {"message": "Payment successful"}
        except Exception as e:
            logger.error(f"[BOOKING: VERIFY BOOKING] {e}")
            raise

    async def get_booking(self, booking_id: str) -> Booking:
        try:
            return await self._get_booking(booking_id, "Booking not found")
        except Exception as e:
            logger.error(f"[BOOKING: GET BOOKING] {e}")
            raise

    async def _get_booking(self, booking_id: str, missing_message: str) -> Booking:
        booking = await self.store.get_booking(booking_id)
        if booking is None:
            raise NotFound(missing_message)
        return booking

    async def _get_storage(self, storage_id: str) -> StorageFacility:
        storage = await self.store.get_storage(storage_id)
        if storage is None:
            raise NotFound("Storage not found")
        return storage

    def _build_booking(
        self,
        user_id: str,
        storage: StorageFacility,
        user_name: str,
        boxes: int,
        amount: int,
        storage_type: str,
        order_id: str,
        duration: int,
    ) -> BookingCreate:
        from_date = self.clock()
        return BookingCreate(
            storage_id=storage.id,
            user_id=user_id,
            user_name=user_name,
            storage_name=storage.name,
            image=storage.cover_image,
            boxes=boxes,
            amount=amount,
            address=storage.address,
            phone=storage.phone,
            storage_type=storage_type,
            order_id=order_id,
            from_date=from_date,
            to_date=from_date + timedelta(weeks=duration),
            paid=False,
        )
