"""Fake implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without external dependencies:

- FakePaymentGateway: Canned approve/decline responses, records charges
- FakeOrderRepository: In-memory order persistence with sequential ids
- FakeNotifier: Captured emails for assertion
"""

from .notification import FakeNotifier
from .payment import FakePaymentGateway
from .store import FakeOrderRepository

__all__ = [
    "FakeNotifier",
    "FakeOrderRepository",
    "FakePaymentGateway",
]
