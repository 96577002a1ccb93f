"""Custom exception hierarchy for savings-gen."""


class SavingsGenError(Exception):
    """Base exception for all savings-gen errors."""


class SourceUnavailableError(SavingsGenError):
    """Raised when a reference file is missing or a remote fetch fails."""


class SchemaMismatchError(SavingsGenError):
    """Raised when a reference table lacks an expected column or value."""


class SampleSizeExceededError(SavingsGenError):
    """Raised when more unique items are requested than are available."""


class ReferentialIntegrityError(SavingsGenError):
    """Raised when the customer/account relationship is violated."""


class ConfigurationError(SavingsGenError):
    """Raised when configuration is invalid or missing."""


class SinkError(SavingsGenError):
    """Raised when a sink operation fails."""


class InvalidStateError(SavingsGenError):
    """Raised when an operation is called before its inputs exist."""
