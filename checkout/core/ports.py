"""Port interfaces for the checkout use case.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package; in-memory test doubles live in tests/fakes/.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - PaymentGatewayPort: Charge a payment token
   - OrderRepositoryPort: Persist orders and assign ids
   - NotifierPort: Send confirmation emails

2. **Driving Ports** (adapters/external systems call into core)
   - CheckoutPort: Entry point for the checkout use case
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from .models import Cart, ChargeResult, Order, OrderDraft


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class PaymentGatewayPort(ABC):
    """Port for charging a customer through a payment provider.

    Idempotency, retries and currency handling are the adapter's
    responsibility, not the core's.
    """

    @abstractmethod
    async def charge(self, amount: Decimal, token: str) -> ChargeResult:
        """Charge the given amount against a payment token.

        Args:
            amount: Final amount to charge, discount already applied.
            token: Opaque payment token (e.g. a card reference).

        Returns:
            ChargeResult whose ``success`` flag reports approval.
            A declined payment is a normal result, not an exception.

        Raises:
            Exception: If the provider is unreachable or misbehaves.
        """


class OrderRepositoryPort(ABC):
    """Port for persisting orders.

    Adapters assign the order id and tag the stored status.
    """

    @abstractmethod
    async def save(self, draft: OrderDraft) -> Order:
        """Persist a new order.

        Args:
            draft: Cart, charged total and status of the order.

        Returns:
            The persisted Order with its assigned id.

        Raises:
            Exception: If the backing store is unavailable.
        """


class NotifierPort(ABC):
    """Port for delivering emails to customers.

    Delivery guarantees are the adapter's responsibility.
    """

    @abstractmethod
    async def send_email(self, to_address: str, subject: str, body: str) -> bool:
        """Send an email.

        Args:
            to_address: Recipient address.
            subject: Subject line.
            body: Plain-text body.

        Returns:
            True if the message was accepted for delivery.

        Raises:
            Exception: If the delivery channel is unavailable.
        """


# ============================================================================
# DRIVING PORTS (Adapters/external systems call into core)
# ============================================================================


class CheckoutPort(ABC):
    """Port for converting a cart into a paid, persisted order.

    Implementations of this port live in the core (checkout_service.py).
    """

    @abstractmethod
    async def process_order(self, cart: Cart, payment_token: str) -> Order | None:
        """Charge, persist and confirm an order.

        High-level flow:
        1. Compute the cart total, applying the loyalty discount
        2. Charge the payment token
        3. On approval, persist the order
        4. Send a confirmation email

        Returns:
            The persisted Order, or None if the payment was declined.

        Raises:
            Exception: Any repository or notifier failure, unmodified.
        """
