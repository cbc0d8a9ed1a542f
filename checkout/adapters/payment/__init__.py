"""Payment gateway adapters for charging customers.

Implementations support:
- HTTP JSON payment provider
"""

from .http import HttpPaymentGatewayAdapter, PaymentGatewayError

__all__ = ["HttpPaymentGatewayAdapter", "PaymentGatewayError"]
