"""Logging levels and filters, a callback queue, returners and reference counts for an actor runtime."""

__version__ = "0.2.12"
__all__ = ["log", "queue", "ret", "refcount"]