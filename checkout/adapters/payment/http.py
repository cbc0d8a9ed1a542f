"""HTTP payment gateway adapter.

Implements PaymentGatewayPort by posting charges to a payment provider's
REST API. Normalizes provider responses into core ChargeResult models.
"""

import logging
from decimal import Decimal
from typing import Any

import httpx

from checkout.core.models import ChargeResult
from checkout.core.ports import PaymentGatewayPort

logger = logging.getLogger(__name__)

# Conventional status code for a declined card
PAYMENT_REQUIRED = 402


class PaymentGatewayError(Exception):
    """Raised when the payment provider returns an unusable response."""


class HttpPaymentGatewayAdapter(PaymentGatewayPort):
    """Payment gateway backed by a JSON REST API."""

    def __init__(
        self,
        api_url: str,
        api_key: str = "",
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the HTTP payment gateway.

        Args:
            api_url: Base URL for the provider API (e.g., http://localhost:9000)
            api_key: Optional API key sent as a bearer token
            timeout_seconds: Request timeout
            transport: Optional httpx transport (used to inject a mock transport)
        """
        self.api_url = api_url.rstrip("/")
        self.api_key = api_key
        self.client = httpx.AsyncClient(
            base_url=self.api_url,
            headers=self._get_headers(),
            timeout=timeout_seconds,
            transport=transport,
        )

    def _get_headers(self) -> dict[str, str]:
        """Build request headers."""
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.client.aclose()

    async def close(self) -> None:
        """Close the httpx client and clean up resources."""
        await self.client.aclose()

    async def charge(self, amount: Decimal, token: str) -> ChargeResult:
        """Post a charge request and report whether it was approved."""
        response = await self.client.post(
            "/charges",
            json={"amount": str(amount), "token": token},
        )

        if response.status_code == PAYMENT_REQUIRED:
            logger.info(f"Charge of {amount} declined by provider")
            return ChargeResult(success=False)

        response.raise_for_status()
        return self._parse_charge_result(response.json())

    @staticmethod
    def _parse_charge_result(data: Any) -> ChargeResult:
        """Convert a provider response body into a ChargeResult.

        Raises:
            PaymentGatewayError: If the body has no boolean ``success`` field.
        """
        if not isinstance(data, dict) or not isinstance(data.get("success"), bool):
            raise PaymentGatewayError(f"Malformed charge response: {data!r}")

        transaction_id = data.get("transaction_id")
        return ChargeResult(
            success=data["success"],
            transaction_id=str(transaction_id) if transaction_id is not None else None,
        )
