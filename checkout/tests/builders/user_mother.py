"""Object Mother for users.

Fixed, named instances for a simple entity that rarely varies
between tests.
"""

from checkout.core.models import Tier, User


class UserMother:
    """Factory of canonical users."""

    @staticmethod
    def a_standard_user() -> User:
        return User(id=1, name="John Smith", email="john@email.com", tier=Tier.STANDARD)

    @staticmethod
    def a_premium_user() -> User:
        return User(id=2, name="Mary Jones", email="premium@email.com", tier=Tier.PREMIUM)
