"""Errors raised by the cipher core."""


class VigenereError(ValueError):
    """Base class for rejected cipher input."""


class InvalidKey(VigenereError):
    """Key is absent, empty after normalization, or not canonical."""


class InvalidPlainText(VigenereError):
    """Plaintext is absent."""
