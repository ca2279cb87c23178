import logging
import random
from typing import Any, Dict, Optional

import requests

from app.core import errors
from app.core.config import settings

logger = logging.getLogger(__name__)


class RazorpayGateway:
    """Creates payment orders through the Razorpay Orders API."""

    def __init__(
        self,
        key_id: str,
        key_secret: str,
        base_url: str = "https://api.razorpay.com/v1",
        timeout: int = 10,
        default_currency: str = "INR",
    ):
        self.key_id = key_id
        self.key_secret = key_secret
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.default_currency = default_currency

    @classmethod
    def from_settings(cls) -> "RazorpayGateway":
        if not settings.RAZORPAY_KEY_ID or not settings.RAZORPAY_KEY_SECRET:
            logger.warning("Razorpay credentials not configured. Order creation will fail.")
        return cls(
            key_id=settings.RAZORPAY_KEY_ID,
            key_secret=settings.RAZORPAY_KEY_SECRET,
            base_url=settings.RAZORPAY_BASE_URL,
            timeout=settings.PAYMENT_TIMEOUT_SECONDS,
            default_currency=settings.DEFAULT_CURRENCY,
        )

    def create_order(self, amount: float, currency: Optional[str] = None) -> Dict[str, Any]:
        """
        Create an order for ``amount`` in major units (rupees).

        The gateway expects the smallest currency unit, so the amount is sent
        multiplied by 100.
        """
        payload = {
            "amount": int(round(amount * 100)),
            "currency": currency or self.default_currency,
            "receipt": f"receipt_order_{random.randint(0, 9999)}",
        }

        try:
            response = requests.post(
                f"{self.base_url}/orders",
                json=payload,
                auth=(self.key_id, self.key_secret),
                timeout=self.timeout,
            )
            response.raise_for_status()
            order = response.json()
        except requests.exceptions.Timeout as exc:
            logger.error("Timeout while creating Razorpay order")
            raise errors.GatewayError() from exc
        except requests.exceptions.RequestException as exc:
            logger.error("Razorpay order creation failed: %s", exc)
            raise errors.GatewayError() from exc
        except ValueError as exc:
            logger.error("Invalid JSON response from Razorpay")
            raise errors.GatewayError() from exc

        logger.info("Created Razorpay order %s", order.get("id"))
        return order
