"""Domain-level exceptions.

Every recoverable failure is a subclass of DomainException so the CLI
layer can catch them uniformly and display user-friendly messages.
ConfigurationError sits outside that hierarchy: a broken
signing setup is fatal for the process, not something a caller can fix
by correcting its input.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input was rejected before any storage access."""


class NotFoundError(DomainException):
    """A requested entity does not exist."""


class AuthenticationError(DomainException):
    """Credentials or a bearer token were rejected."""


class StorageError(DomainException):
    """The storage backend failed to read or write a record."""


class ConfigurationError(Exception):
    """Process-wide configuration is unusable (e.g. token signing)."""
