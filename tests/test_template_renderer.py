"""Tests for notification rendering."""

import pytest

from pwnotify.services.reporting.template_renderer import (
    build_tokens,
    render,
    render_message,
    substitute_tokens,
)

from conftest import make_account


class TestRender:
    """Test template substitution."""

    TEMPLATE = "Dear [USERNAME], ... [PASSWORDSTATEMESSAGE]"

    def test_days_remaining(self):
        body = render(self.TEMPLATE, "J. Doe", 3)

        assert "Dear J. Doe" in body
        assert "will expire in 3 days" in body

    def test_expired(self):
        body = render(self.TEMPLATE, "J. Doe", -2)
        assert "is expired" in body

    def test_zero_days_is_expired(self):
        assert render("[PASSWORDSTATEMESSAGE]", "x", 0) == "is expired"

    def test_all_occurrences_replaced(self):
        body = render("[USERNAME] [USERNAME]", "Ann", 1)
        assert body == "Ann Ann"

    def test_tabs_are_stripped(self):
        body = render("Hello\n\t\t[USERNAME]\n\tBye", "Ann", 1)
        assert body == "Hello\nAnn\nBye"

    def test_unknown_tokens_pass_through(self):
        body = render("[USERNAME] [DEADLINE]", "Ann", 1)
        assert body == "Ann [DEADLINE]"


class TestTokens:
    """Test token mapping."""

    def test_build_tokens(self):
        assert build_tokens("Ann", 4) == {
            "[USERNAME]": "Ann",
            "[PASSWORDSTATEMESSAGE]": "will expire in 4 days",
        }

    def test_substitute_extra_token(self):
        assert substitute_tokens("Hi [NAME]", {"[NAME]": "Bob"}) == "Hi Bob"


class TestRenderMessage:
    """Test message construction."""

    def test_addressed_to_account(self, config):
        account = make_account("jdoe", 55, display="J. Doe")
        message = render_message(config, account, 5)

        assert message.recipient == "jdoe@example.org"
        assert message.sender == "noreply@example.org"
        assert message.subject == "Password notice for J. Doe"
        assert message.body == "Dear J. Doe,\nyour password will expire in 5 days."

    def test_missing_mail_address_raises(self, config):
        account = make_account("jdoe", 55, mail="")
        with pytest.raises(ValueError):
            render_message(config, account, 5)
