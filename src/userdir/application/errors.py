"""Errors raised by the directory service. Store errors are chained as __cause__."""


class DirectoryError(Exception):
    """Base class for directory service errors."""


class UserLookupError(DirectoryError):
    """The store could not return the requested user."""


class CardRenderError(DirectoryError):
    """The business card template could not be executed."""


class TemplateConfigError(DirectoryError):
    """The business card template is invalid. Raised at startup only."""
