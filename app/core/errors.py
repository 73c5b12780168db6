from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    PAYMENT_VERIFICATION_FAILED = "payment_verification_failed"
    GATEWAY_ERROR = "gateway_error"
    STORE_ERROR = "store_error"


STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 402,
    ErrorKind.PAYMENT_VERIFICATION_FAILED: 402,
    ErrorKind.GATEWAY_ERROR: 502,
    ErrorKind.STORE_ERROR: 500,
}


class BookingError(Exception):
    """
    Base class for every error the booking and account services raise.
    The HTTP status is fixed by the kind.
    """

    kind: ErrorKind

    def __init__(self, message: str, kind: Optional[ErrorKind] = None):
        super().__init__(message)
        if kind is not None:
            self.kind = kind
        self.message = message

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]

    def to_dict(self) -> dict:
        return {"status": self.status_code, "kind": self.kind.value, "message": self.message}


class NotFound(BookingError):
    kind = ErrorKind.NOT_FOUND


class PaymentVerificationFailed(BookingError):
    kind = ErrorKind.PAYMENT_VERIFICATION_FAILED


class GatewayError(BookingError):
    kind = ErrorKind.GATEWAY_ERROR


class StoreError(BookingError):
    kind = ErrorKind.STORE_ERROR
