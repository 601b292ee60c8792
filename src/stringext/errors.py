"""Error definitions for STRINGEXT."""

# ============================================================================
#                           General errors
# ============================================================================


class StringExtError(Exception):
    """Base class for STRINGEXT errors."""


class InvalidArgumentError(StringExtError, ValueError):
    """Raised when a caller passes an unusable argument."""

    def __init__(self, param_name: str, reason: str) -> None:
        super().__init__(f"{reason} (parameter '{param_name}')")
        self.param_name = param_name
        self.reason = reason


# ============================================================================
#                       SecureString related errors
# ============================================================================


class SecureStringStateError(StringExtError):
    """Raised when a SecureString is in an invalid state for the attempted action."""


class ReadOnlySecureStringError(SecureStringStateError):
    """Raised when modifying a SecureString that was made read-only."""

    def __init__(self) -> None:
        super().__init__("SecureString is read-only and cannot be modified.")


class DisposedSecureStringError(SecureStringStateError):
    """Raised when using a SecureString after it has been disposed."""

    def __init__(self) -> None:
        super().__init__("SecureString has been disposed.")
