from typing import Generic, TypeVar, Optional
from pydantic import BaseModel
from app.core.errors import ErrorKind

T = TypeVar("T")

class APIResponse(BaseModel, Generic[T]):
    data: Optional[T] = None
    message: str = "Success"
    success: bool = True

class ErrorResponse(BaseModel):
    """Body returned for every BookingError."""
    status: int
    kind: ErrorKind
    message: str

ERROR_RESPONSES = {
    402: {"model": ErrorResponse, "description": "Not found or payment verification failed"},
    500: {"model": ErrorResponse, "description": "Document store failure"},
    502: {"model": ErrorResponse, "description": "Payment gateway failure"},
}
