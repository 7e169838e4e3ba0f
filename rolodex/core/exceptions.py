"""Custom exceptions for the Rolodex."""


class RolodexError(Exception):
    """Base exception for all Rolodex errors."""

    pass


class ConfigurationError(RolodexError):
    """Raised when a workspace or dataset configuration is invalid."""

    pass


class ValidationError(RolodexError):
    """Raised when a definition fails schema validation."""

    pass


class ExtractError(RolodexError):
    """Raised when reading a record collection fails."""

    pass


class LoadError(RolodexError):
    """Raised when writing an export fails."""

    pass


class ContactImportError(RolodexError):
    """Raised when a contact import file cannot be read."""

    pass


class WorkspaceError(RolodexError):
    """Raised when loading a workspace fails."""

    pass
