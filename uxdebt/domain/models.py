"""
models.py - Domain models
Single responsibility: typed containers for core entities.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DebtType(str, Enum):
    VISUAL = "Visual"
    ACCESSIBILITY = "Accessibility"
    COPY = "Copy"
    USABILITY = "Usability"


class Severity(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class Status(str, Enum):
    OPEN = "Open"
    IN_PROGRESS = "In Progress"
    FIXED = "Fixed"
    RESOLVED = "Resolved"


# Linear lifecycle; Resolved is terminal.
STATUS_ORDER: list[Status] = [
    Status.OPEN,
    Status.IN_PROGRESS,
    Status.FIXED,
    Status.RESOLVED,
]
STATUS_FLOW: dict[Status, Status | None] = {
    Status.OPEN: Status.IN_PROGRESS,
    Status.IN_PROGRESS: Status.FIXED,
    Status.FIXED: Status.RESOLVED,
    Status.RESOLVED: None,
}


@dataclass
class Project:
    id: str
    name: str
    description: str = ""
    created_at: str | None = None

    def __getitem__(self, key):
        return getattr(self, key)


@dataclass
class DebtItem:
    id: str
    project_id: str
    title: str
    screen: str
    type: DebtType
    severity: Severity
    description: str
    recommendation: str
    logged_by: str
    status: Status = Status.OPEN
    created_at: str | None = None
    updated_at: str | None = None
    screenshot: str | None = None
    figma_link: str | None = None

    def __getitem__(self, key):
        return getattr(self, key)


@dataclass
class DebtDraft:
    """Pending "new entry" form state; values are raw until validated."""

    project_id: str = ""
    title: str = ""
    screen: str = ""
    type: Optional[str] = None
    severity: Optional[str] = None
    description: str = ""
    recommendation: str = ""
    logged_by: str = ""
    screenshot: str | None = None
    figma_link: str | None = None


@dataclass
class UserIdentity:
    email: str

    @property
    def initials(self) -> str:
        local = self.email.split("@", 1)[0]
        parts = [p for p in local.replace("_", ".").replace("-", ".").split(".") if p]
        if not parts:
            return "?"
        if len(parts) == 1:
            return parts[0][:2].upper()
        return (parts[0][0] + parts[1][0]).upper()
