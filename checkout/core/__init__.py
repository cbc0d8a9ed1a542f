"""Core domain logic for the checkout use case.

This package contains zero external dependencies and represents
the pure business logic of the application. All adapters and
external integrations are handled by the adapters package.
"""

from .checkout_service import CheckoutService
from .models import (
    Cart,
    ChargeResult,
    Item,
    Order,
    OrderDraft,
    OrderStatus,
    Tier,
    User,
    format_amount,
)

__all__ = [
    "Cart",
    "ChargeResult",
    "CheckoutService",
    "Item",
    "Order",
    "OrderDraft",
    "OrderStatus",
    "Tier",
    "User",
    "format_amount",
]
