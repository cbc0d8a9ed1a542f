"""Integration tests for configuration loading and the composition root.

These tests verify that settings are loaded and validated, and that the
composition root wires the configured adapters into CheckoutService.
"""

import os
from decimal import Decimal
from pathlib import Path
from unittest.mock import patch

import httpx
import pytest

from checkout.adapters.notification.markdown import MarkdownNotifierAdapter
from checkout.adapters.notification.stdout import StdoutNotifierAdapter
from checkout.adapters.payment.http import HttpPaymentGatewayAdapter
from checkout.adapters.store.sqlite import SQLiteOrderRepository
from checkout.config import Settings, load_settings
from checkout.core.checkout_service import CheckoutService
from checkout.core.models import Item
from checkout.main import bootstrap, build_checkout_service
from checkout.tests.builders import CartBuilder, UserMother


class TestConfigurationLoading:
    """Test configuration loading and validation."""

    def test_load_settings_with_defaults(self) -> None:
        settings = load_settings()
        assert settings.notification_backend == "stdout"
        assert settings.premium_discount == Decimal("0.10")
        assert settings.currency_symbol == "R$"
        assert settings.confirmation_subject == "Your Order has been Approved!"
        assert settings.log_level == "INFO"

    def test_load_settings_from_env(self) -> None:
        with patch.dict(
            os.environ,
            {
                "PAYMENT_GATEWAY_URL": "http://pay.internal:9000",
                "NOTIFICATION_BACKEND": "markdown",
                "PREMIUM_DISCOUNT": "0.15",
                "LOG_LEVEL": "DEBUG",
            },
        ):
            settings = load_settings()
            assert settings.payment_gateway_url == "http://pay.internal:9000"
            assert settings.notification_backend == "markdown"
            assert settings.premium_discount == Decimal("0.15")
            assert settings.log_level == "DEBUG"

    def test_load_settings_from_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / "checkout.env"
        env_file.write_text("CURRENCY_SYMBOL=US$\n", encoding="utf-8")

        settings = load_settings(str(env_file))
        assert settings.currency_symbol == "US$"

    def test_load_settings_validates_discount(self) -> None:
        with patch.dict(os.environ, {"PREMIUM_DISCOUNT": "1.5"}):
            with pytest.raises(Exception):  # ValidationError
                load_settings()

    def test_load_settings_validates_timeout(self) -> None:
        with patch.dict(os.environ, {"PAYMENT_TIMEOUT_SECONDS": "0"}):
            with pytest.raises(Exception):  # ValidationError
                load_settings()

    def test_load_settings_rejects_unknown_backend(self) -> None:
        with patch.dict(os.environ, {"NOTIFICATION_BACKEND": "carrier-pigeon"}):
            with pytest.raises(Exception):  # ValidationError
                load_settings()


@pytest.mark.asyncio
class TestWiring:
    """Test that adapters are instantiated from settings and wired."""

    async def test_build_with_stdout_notifier(self, tmp_path: Path) -> None:
        settings = Settings(store_sqlite_path=str(tmp_path / "orders.db"))
        service = build_checkout_service(settings)
        try:
            assert isinstance(service, CheckoutService)
            assert isinstance(service.gateway, HttpPaymentGatewayAdapter)
            assert isinstance(service.repository, SQLiteOrderRepository)
            assert isinstance(service.notifier, StdoutNotifierAdapter)
        finally:
            await service.gateway.close()
            await service.repository.close()

    async def test_build_with_markdown_notifier(self, tmp_path: Path) -> None:
        settings = Settings(
            store_sqlite_path=str(tmp_path / "orders.db"),
            notification_backend="markdown",
            notification_output_dir=str(tmp_path / "outbox"),
            premium_discount=Decimal("0.2"),
        )
        service = build_checkout_service(settings)
        try:
            assert isinstance(service.notifier, MarkdownNotifierAdapter)
            assert service.premium_discount == Decimal("0.2")
        finally:
            await service.gateway.close()
            await service.repository.close()

    async def test_bootstrap_returns_working_service(self, tmp_path: Path) -> None:
        """Full checkout through real adapters, with the gateway mocked at HTTP level."""
        settings = Settings(
            store_sqlite_path=str(tmp_path / "orders.db"),
            notification_backend="markdown",
            notification_output_dir=str(tmp_path / "outbox"),
        )
        service = bootstrap(settings)
        await service.gateway.close()
        service.gateway.client = httpx.AsyncClient(
            base_url=service.gateway.api_url,
            transport=httpx.MockTransport(
                lambda r: httpx.Response(200, json={"success": True})
            ),
        )

        cart = (
            CartBuilder()
            .with_user(UserMother.a_premium_user())
            .with_items([Item("Notebook", 150), Item("Mouse", 50)])
            .build()
        )
        try:
            order = await service.process_order(cart, "tok")
        finally:
            await service.gateway.close()
            await service.repository.close()

        assert order is not None
        assert order.id == 1
        assert order.total == Decimal("180")
        outbox_files = list((tmp_path / "outbox").rglob("outbox.md"))
        assert len(outbox_files) == 1
        assert "Order 1 in the amount of R$180" in outbox_files[0].read_text(encoding="utf-8")
