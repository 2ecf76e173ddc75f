"""pwnotify - password expiration notices for directory users."""

__version__ = "0.1.0"
