"""
filters.py - Filter DTOs
Single responsibility: carry filter inputs for the debt list and board.
"""
from dataclasses import dataclass, field
from typing import Optional

from uxdebt.domain.models import DebtType, Severity, Status


@dataclass(frozen=True)
class FilterSpec:
    project_ids: frozenset[str] = field(default_factory=frozenset)
    severity: Optional[Severity] = None
    type: Optional[DebtType] = None
    status: Optional[Status] = None
    search_text: str = ""
