"""
errors.py - Domain exceptions
Single responsibility: error taxonomy shared by services and UI.
"""


class UXDebtError(Exception):
    """Base class for app errors."""


class ValidationError(UXDebtError, ValueError):
    """Raised when a draft or transition has invalid fields.

    ``errors`` maps every failing field name to a user-facing message.
    """

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        super().__init__(
            "Invalid fields: " + ", ".join(self.errors) if self.errors else "Invalid input"
        )

    @property
    def fields(self) -> list[str]:
        return list(self.errors)


class NotFoundError(UXDebtError, LookupError):
    def __init__(self, kind: str, key: str):
        self.kind = kind
        self.key = key
        super().__init__(f"{kind} {key} not found")


class PersistenceError(UXDebtError):
    """Store write failure. ``item`` carries the optimistic in-memory result, if any."""

    def __init__(self, message: str, item=None):
        super().__init__(message)
        self.item = item
