"""Checkout orchestration.

This module coordinates a single checkout by driving the payment
gateway, order repository and notifier ports in sequence.
"""

import logging
from decimal import Decimal

from .models import Cart, Order, OrderDraft, OrderStatus, format_amount
from .ports import CheckoutPort, NotifierPort, OrderRepositoryPort, PaymentGatewayPort

logger = logging.getLogger(__name__)

DEFAULT_PREMIUM_DISCOUNT = Decimal("0.10")
DEFAULT_CURRENCY_SYMBOL = "R$"
DEFAULT_CONFIRMATION_SUBJECT = "Your Order has been Approved!"


class CheckoutService(CheckoutPort):
    """Orchestrates charge, persistence and confirmation of an order.

    Uses ports but contains no adapter-specific logic. Holds nothing
    but its collaborator references and pricing options, so one
    instance can serve concurrent checkouts.
    """

    def __init__(
        self,
        gateway: PaymentGatewayPort,
        repository: OrderRepositoryPort,
        notifier: NotifierPort,
        *,
        premium_discount: Decimal = DEFAULT_PREMIUM_DISCOUNT,
        currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
        confirmation_subject: str = DEFAULT_CONFIRMATION_SUBJECT,
    ):
        premium_discount = Decimal(str(premium_discount))
        if not Decimal("0") <= premium_discount <= Decimal("1"):
            raise ValueError(
                f"premium_discount must be between 0 and 1, got {premium_discount}"
            )
        self.gateway = gateway
        self.repository = repository
        self.notifier = notifier
        self.premium_discount = premium_discount
        self.currency_symbol = currency_symbol
        self.confirmation_subject = confirmation_subject

    def calculate_total(self, cart: Cart) -> Decimal:
        """Return the amount to charge for a cart.

        Premium customers get ``premium_discount`` off the subtotal.
        """
        subtotal = cart.subtotal
        if cart.user.is_premium:
            return subtotal * (Decimal("1") - self.premium_discount)
        return subtotal

    def confirmation_body(self, order: Order) -> str:
        return (
            f"Order {order.id} in the amount of "
            f"{self.currency_symbol}{format_amount(order.total)}"
        )

    async def process_order(self, cart: Cart, payment_token: str) -> Order | None:
        """Charge the cart, then persist and confirm the order.

        Steps:
        1. Compute total with loyalty discount
        2. Charge via the payment gateway
        3. Stop with None on decline (no persistence, no email)
        4. Persist the order
        5. Email the confirmation

        There is no compensation: if the email fails, the order stays
        persisted and the error is re-raised.

        Raises:
            Any exception from the repository or notifier is re-raised
            after logging.
        """
        # 1. Compute total
        total = self.calculate_total(cart)
        logger.info(
            f"Charging {total} for user {cart.user.id} "
            f"({len(cart.items)} items, tier {cart.user.tier.value})"
        )

        # 2. Charge
        result = await self.gateway.charge(total, payment_token)

        # 3. Declined
        if not result.success:
            logger.warning(f"Payment declined for user {cart.user.id}, amount {total}")
            return None

        # 4. Persist (before notification)
        try:
            order = await self.repository.save(
                OrderDraft(cart=cart, total=total, status=OrderStatus.PROCESSED)
            )
        except Exception as e:
            logger.error(
                f"Failed to persist order for user {cart.user.id} after successful "
                f"charge of {total}: {e}",
                exc_info=True,
            )
            raise

        # 5. Notify (failure here leaves the persisted order in place)
        try:
            await self.notifier.send_email(
                cart.user.email,
                self.confirmation_subject,
                self.confirmation_body(order),
            )
        except Exception as e:
            logger.error(
                f"Failed to send confirmation for order {order.id}: {e}",
                exc_info=True,
            )
            raise

        logger.info(f"Order {order.id} processed for user {cart.user.id}")
        return order
