import logging
from typing import Optional

import razorpay
import requests
from fastapi.concurrency import run_in_threadpool
from razorpay.errors import BadRequestError, GatewayError as RazorpayGatewayError, ServerError, SignatureVerificationError

from app.core.errors import GatewayError, PaymentVerificationFailed

logger = logging.getLogger(__name__)

ORDER_ERRORS = (BadRequestError, RazorpayGatewayError, ServerError, requests.RequestException)


class RazorpayGateway:
    """
    Order creation and checkout signature checks through the Razorpay SDK.
    The key secret doubles as the signing secret and never leaves this object.
    """

    def __init__(self, key_id: str, key_secret: str, client: Optional[razorpay.Client] = None):
        if client is not None:
            self.client = client
        elif key_id and key_secret:
            self.client = razorpay.Client(auth=(key_id, key_secret))
        else:
            self.client = None
            logger.warning("Razorpay keys not set. Payment operations will fail.")

    def _require_client(self) -> razorpay.Client:
        if not self.client:
            raise GatewayError("Razorpay client not initialized")
        return self.client

    async def create_order(self, amount: int, currency: str, receipt: str) -> str:
        """
        Create an order for `amount` in the smallest currency unit and return its id.
        """
        client = self._require_client()
        data = {
            "amount": amount,
            "currency": currency,
            "receipt": receipt,
        }

        try:
            order = await run_in_threadpool(client.order.create, data=data)
        except ORDER_ERRORS as e:
            logger.error(f"Error creating Razorpay order: {e}")
            raise GatewayError(f"Error creating Razorpay order: {e}") from e

        order_id = order.get("id") if isinstance(order, dict) else None
        if not order_id:
            raise GatewayError(f"Razorpay order response missing id: {order}")
        logger.info(f"Created Razorpay order {order_id} for {amount} {currency}")
        return order_id

    def verify_payment_signature(self, order_id: str, payment_id: str, signature: str) -> None:
        """
        Check the signature Checkout returned for `order_id|payment_id`.
        Raises PaymentVerificationFailed on mismatch.
        """
        client = self._require_client()
        try:
            client.utility.verify_payment_signature({
                "razorpay_order_id": order_id,
                "razorpay_payment_id": payment_id,
                "razorpay_signature": signature,
            })
        except SignatureVerificationError as e:
            logger.warning(f"Payment signature verification failed for order {order_id}: {e}")
            raise PaymentVerificationFailed("Payment verification failed") from e
