from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Document(BaseModel):
    """
    Base for records kept in the document store.
    Stored keys are camelCase; attributes are snake_case.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class BookingBase(Document):
    storage_id: str
    user_id: str
    user_name: str
    storage_name: str
    image: str = ""
    boxes: int
    amount: int  # smallest currency unit (e.g. paise)
    address: str = ""
    phone: str = ""
    storage_type: str
    order_id: str
    from_date: datetime
    to_date: datetime
    paid: bool = False
    paid_at: Optional[datetime] = None


class BookingCreate(BookingBase):
    pass


class Booking(BookingBase):
    id: str


# Request / response bodies

class CreateBookingRequest(BaseModel):
    userId: str
    storageId: str
    boxes: int = Field(ge=1)
    amount: int = Field(gt=0)  # Amount in smallest currency unit (e.g., paise)
    storageType: str
    duration: int = Field(ge=1)  # weeks
    userName: str


class CreateBookingResponse(BaseModel):
    orderId: str
    bookingId: str


class VerifyBookingRequest(BaseModel):
    razorpay_payment_id: str
    razorpay_order_id: str
    razorpay_signature: str
    bookingId: str


class MessageResponse(BaseModel):
    message: str
