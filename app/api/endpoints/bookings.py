from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from app.api.deps import get_booking_service, get_current_user_conditional
from app.core.security import TokenData
from app.schemas.booking import (
    Booking,
    CreateBookingRequest,
    CreateBookingResponse,
    MessageResponse,
    VerifyBookingRequest,
)
from app.schemas.common import ERROR_RESPONSES
from app.services.booking_service import BookingService

router = APIRouter(responses=ERROR_RESPONSES)


@router.post("/create", response_model=CreateBookingResponse)
async def create_booking(
    request: CreateBookingRequest,
    service: BookingService = Depends(get_booking_service),
    current_user: Optional[TokenData] = Depends(get_current_user_conditional),
):
    """
    Create an unpaid booking and a Razorpay order to pay for it.

    Returns: orderId, bookingId
    """
    if current_user is not None and current_user.id != request.userId:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized to book for this user")

    result = await service.create_booking(
        request.userId,
        request.storageId,
        request.boxes,
        request.amount,
        request.storageType,
        request.duration,
        request.userName,
    )
    return CreateBookingResponse(**result)


@router.post("/verify", response_model=MessageResponse)
async def verify_booking(
    request: VerifyBookingRequest,
    service: BookingService = Depends(get_booking_service),
):
    """
    Verify the Razorpay checkout signature and mark the booking paid.
    """
    result = await service.verify_booking(
        request.razorpay_payment_id,
        request.razorpay_order_id,
        request.razorpay_signature,
        request.bookingId,
    )
    return MessageResponse(**result)


@router.get("/{booking_id}", response_model=Booking, response_model_by_alias=True)
async def read_booking(
    booking_id: str,
    service: BookingService = Depends(get_booking_service),
    current_user: Optional[TokenData] = Depends(get_current_user_conditional),
):
    booking = await service.get_booking(booking_id)
    if current_user is not None and current_user.id != booking.user_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized to view this booking")
    return booking
