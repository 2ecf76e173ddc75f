"""Notification rendering and run reporting"""

from .run_reporter import RunReporter
from .template_renderer import build_tokens, render, render_message, substitute_tokens

__all__ = ["RunReporter", "build_tokens", "render", "render_message", "substitute_tokens"]
