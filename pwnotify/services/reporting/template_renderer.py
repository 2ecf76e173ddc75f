"""Notification template rendering."""

from typing import Dict

from pwnotify.config.run_config import RunConfig
from pwnotify.models.account_record import AccountRecord
from pwnotify.models.message import Message

USERNAME_TOKEN = "[USERNAME]"
PASSWORD_STATE_TOKEN = "[PASSWORDSTATEMESSAGE]"


def password_state_message(days_to_expiry: int) -> str:
    """
    Describe the password state for the notification text.

    Examples:
        >>> password_state_message(3)
        'will expire in 3 days'
        >>> password_state_message(0)
        'is expired'
    """
    if days_to_expiry > 0:
        return f"will expire in {days_to_expiry} days"
    return "is expired"


def build_tokens(display_name: str, days_to_expiry: int) -> Dict[str, str]:
    """Token -> replacement mapping for one notification."""
    return {
        USERNAME_TOKEN: display_name,
        PASSWORD_STATE_TOKEN: password_state_message(days_to_expiry),
    }


def substitute_tokens(template: str, tokens: Dict[str, str]) -> str:
    """Replace every occurrence of each token. Unknown tokens are left alone."""
    result = template
    for token, value in tokens.items():
        result = result.replace(token, value)
    return result


def render(template: str, display_name: str, days_to_expiry: int) -> str:
    """
    Render a notification template for one user.

    Args:
        template: Template text with [USERNAME] and [PASSWORDSTATEMESSAGE]
        display_name: User's display name
        days_to_expiry: Days left, zero or negative when expired

    Returns:
        Rendered text with all tab characters removed
    """
    rendered = substitute_tokens(template, build_tokens(display_name, days_to_expiry))
    return rendered.replace("\t", "")


def render_message(config: RunConfig, account: AccountRecord, days_to_expiry: int) -> Message:
    """Build the notification email for an account, addressed to the account itself."""
    display_name = account.display_name or account.account_name
    return Message(
        sender=config.email_from,
        recipient=account.mail_address,
        subject=render(config.email_subject, display_name, days_to_expiry),
        body=render(config.email_body_template, display_name, days_to_expiry),
    )
