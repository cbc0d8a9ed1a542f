"""Test data creation helpers.

- UserMother: Object Mother with fixed, named users
- CartBuilder: Data Builder with a fluent API for carts
"""

from .cart_builder import CartBuilder
from .user_mother import UserMother

__all__ = ["CartBuilder", "UserMother"]
