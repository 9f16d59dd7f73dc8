"""Errors raised by the service layer."""


class PersistenceError(Exception):
    """A storage operation failed.

    The message names the failing operation followed by the underlying cause,
    e.g. ``"Failed to save product: <cause>"``.
    """
