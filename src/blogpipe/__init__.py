"""Static blog helpers: post index builder and Discord release notifier."""

__version__ = "0.1.0"
