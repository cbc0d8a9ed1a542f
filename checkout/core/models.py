"""Domain models for the checkout use case.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain. Money is
always carried as Decimal so discount arithmetic stays exact.
"""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import TypeAlias

Amount: TypeAlias = Decimal | int | float | str

_CENTS = Decimal("0.01")


def to_decimal(value: Amount) -> Decimal:
    """Coerce a numeric value to Decimal without binary float drift.

    Raises:
        ValueError: If the value is not a number, or is NaN or infinite.
    """
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value))
        except InvalidOperation as e:
            raise ValueError(f"not a valid amount: {value!r}") from e
    if not amount.is_finite():
        raise ValueError(f"amount must be finite, got {value!r}")
    return amount


def format_amount(value: Amount) -> str:
    """Render an amount as currency-like text.

    Integral amounts are shown without decimals, anything else with
    exactly two decimal places.

    Examples:
        >>> format_amount(Decimal("180.00"))
        '180'
        >>> format_amount(Decimal("179.1"))
        '179.10'
    """
    amount = to_decimal(value)
    if amount == amount.to_integral_value():
        return f"{amount.to_integral_value():f}"
    return f"{amount.quantize(_CENTS, rounding=ROUND_HALF_UP):f}"


class Tier(Enum):
    """Customer classification driving discount eligibility."""

    STANDARD = "STANDARD"
    PREMIUM = "PREMIUM"


class OrderStatus(Enum):
    """Lifecycle outcome of a checkout."""

    PROCESSED = "PROCESSED"
    FAILED = "FAILED"


@dataclass(frozen=True)
class Item:
    """A purchasable line in a cart."""

    name: str
    price: Decimal

    def __post_init__(self) -> None:
        """Validate item invariants and normalize the price."""
        if not self.name or not self.name.strip():
            raise ValueError("name must be a non-empty string")
        price = to_decimal(self.price)
        if price < 0:
            raise ValueError(f"price must be non-negative, got {price}")
        object.__setattr__(self, "price", price)


@dataclass(frozen=True)
class User:
    """The customer placing an order."""

    id: int
    name: str
    email: str
    tier: Tier = Tier.STANDARD

    def __post_init__(self) -> None:
        """Validate user invariants on creation."""
        if not self.email or not self.email.strip():
            raise ValueError("email must be a non-empty string")
        if isinstance(self.tier, str):
            object.__setattr__(self, "tier", Tier(self.tier))

    @property
    def is_premium(self) -> bool:
        return self.tier is Tier.PREMIUM


@dataclass(frozen=True)
class Cart:
    """A user together with the items they intend to buy.

    Items are frozen into a tuple on construction; the subtotal is
    derived on every access and never cached.
    """

    user: User
    items: tuple[Item, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Convert items to an immutable tuple."""
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    @property
    def subtotal(self) -> Decimal:
        return sum((item.price for item in self.items), Decimal("0"))

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass(frozen=True)
class ChargeResult:
    """Outcome reported by a payment gateway."""

    success: bool
    transaction_id: str | None = None


@dataclass(frozen=True)
class OrderDraft:
    """Everything a repository needs to persist a new order.

    The repository is responsible for assigning the order id.
    """

    cart: Cart
    total: Decimal
    status: OrderStatus = OrderStatus.PROCESSED

    def __post_init__(self) -> None:
        object.__setattr__(self, "total", to_decimal(self.total))


@dataclass(frozen=True)
class Order:
    """A persisted checkout result. Never mutated after creation."""

    id: int
    cart: Cart
    total: Decimal
    status: OrderStatus

    def __post_init__(self) -> None:
        """Normalize total and status on creation."""
        total = to_decimal(self.total)
        if total < 0:
            raise ValueError(f"total must be non-negative, got {total}")
        object.__setattr__(self, "total", total)
        if isinstance(self.status, str):
            object.__setattr__(self, "status", OrderStatus(self.status))
