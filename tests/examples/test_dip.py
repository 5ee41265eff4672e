"""Tests for the dependency inversion examples."""

from unittest.mock import Mock

from solid_examples.examples import dip_02, dip_03
from solid_examples.protocols import Notifier


class TestNotifiers:
    """Test dip_01 to dip_03."""

    def test_tight_coupling(self, run_example):
        assert run_example("dip_01") == (
            "=== Problem: Tight Coupling ===\n\nOrder #101 placed\nSending email: Order #101 confirmed\n"
        )

    def test_injected_notifiers(self, run_example):
        assert run_example("dip_02") == (
            "=== Dependency Inversion Principle ===\n"
            "\n"
            "Order #201 placed\n"
            "Sending email: Order #201 confirmed\n"
            "\n"
            "Order #202 placed\n"
            "Sending SMS: Order #202 confirmed\n"
        )

    def test_service_accepts_any_notifier(self, echo_lines):
        """Test the service only needs something with send()."""
        lines, echo = echo_lines
        notifier = Mock(spec=["send"])

        dip_02.OrderService(notifier, echo).place_order(7)

        assert lines == ["Order #7 placed"]
        notifier.send.assert_called_once_with("Order #7 confirmed")

    def test_senders(self, run_example):
        assert run_example("dip_03") == (
            "Order #101 placed\n"
            "Sending by email: Order #101 confirmed\n"
            "\n"
            "Order #42 placed\n"
            "Sending by sms: Order #42 confirmed\n"
            "\n"
            "Order #13 placed\n"
            "Sending by \U0001f989: Order #13 confirmed\n"
        )

    def test_senders_are_notifiers(self, echo_lines):
        _, echo = echo_lines
        for sender in (dip_03.Email(echo), dip_03.Sms(echo), dip_03.Owl(echo)):
            assert isinstance(sender, Notifier)


class TestHexagonalDemo:
    """Test dip_04."""

    def test_output(self, run_example):
        assert run_example("dip_04") == (
            "=== Hexagonal Architecture Demo ===\n"
            "\n"
            "--- Configuration #1: In-Memory Adapters (Testing) ---\n"
            "\n"
            "  [Mock] Charging $179.98\n"
            "  [InMemory] Saving order #OrderId(1)\n"
            "  [Console] Order #OrderId(1) confirmed! Total: $179.98\n"
            "\n"
            "  Success! Order OrderId(1) placed.\n"
            "\n"
            "--- Configuration #2: External Services (Production) ---\n"
            "\n"
            "  [Stripe API] POST /charges amount=$179.98\n"
            "  [Postgres] INSERT INTO orders VALUES (OrderId(1), ...)\n"
            "  [SendGrid API] Sending email: 'Order #OrderId(1) Confirmed'\n"
            "\n"
            "  Success! Order OrderId(1) placed.\n"
            "\n"
            "  [Postgres] SELECT * FROM orders WHERE id = OrderId(1)\n"
            "  Retrieved: 2 items, total $179.98\n"
            "\n"
        )
