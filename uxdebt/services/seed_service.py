"""
seed_service.py - First-run demo data
Single responsibility: populate an empty store with sample projects and entries.
"""
import logging

from uxdebt.database.repositories import debt_items as debt_repo
from uxdebt.database.repositories import projects as project_repo
from uxdebt.database.store import CollectionStore
from uxdebt.domain.models import DebtItem, DebtType, Project, Severity, Status

logger = logging.getLogger(__name__)

DEMO_PROJECTS = [
    Project(id="1", name="Main Website", description="Marketing website and landing pages"),
    Project(id="2", name="Mobile App", description="iOS and Android application"),
    Project(id="3", name="Admin Dashboard", description="Internal admin panel"),
    Project(id="4", name="Customer Portal", description="Client-facing portal"),
]

DEMO_DEBT_ITEMS = [
    DebtItem(
        id="1",
        project_id="1",
        title="Navigation links missing ARIA labels",
        screen="Navigation Header",
        type=DebtType.ACCESSIBILITY,
        severity=Severity.HIGH,
        description="Navigation links lack proper ARIA labels and keyboard focus indicators",
        recommendation="Add aria-label attributes and implement visible focus states for all interactive elements",
        logged_by="Sarah Chen",
        status=Status.OPEN,
        created_at="2024-06-10T10:00:00+00:00",
        updated_at="2024-06-10T10:00:00+00:00",
    ),
    DebtItem(
        id="2",
        project_id="2",
        title="Unclear password errors",
        screen="Login Form",
        type=DebtType.USABILITY,
        severity=Severity.MEDIUM,
        description="Password field shows unclear error messages when validation fails",
        recommendation="Implement specific error messages for different password requirements",
        logged_by="Alex Rodriguez",
        status=Status.IN_PROGRESS,
        created_at="2024-06-09T14:30:00+00:00",
        updated_at="2024-06-11T09:15:00+00:00",
    ),
    DebtItem(
        id="3",
        project_id="3",
        title="Misaligned table headers",
        screen="Data Table",
        type=DebtType.VISUAL,
        severity=Severity.LOW,
        description="Table headers are not properly aligned with data columns",
        recommendation="Adjust CSS grid or table layout to ensure proper alignment",
        logged_by="Maria Santos",
        status=Status.RESOLVED,
        created_at="2024-06-08T16:45:00+00:00",
        updated_at="2024-06-12T11:20:00+00:00",
    ),
    DebtItem(
        id="4",
        project_id="4",
        title="Confusing upload instructions",
        screen="File Upload",
        type=DebtType.COPY,
        severity=Severity.MEDIUM,
        description="Upload instructions are unclear and cause user confusion",
        recommendation="Rewrite upload instructions with clear steps and file format requirements",
        logged_by="David Kim",
        status=Status.OPEN,
        created_at="2024-06-07T13:20:00+00:00",
        updated_at="2024-06-07T13:20:00+00:00",
    ),
    DebtItem(
        id="5",
        project_id="1",
        title="Form errors not announced",
        screen="Contact Form",
        type=DebtType.ACCESSIBILITY,
        severity=Severity.HIGH,
        description="Form validation errors are not announced to screen readers",
        recommendation="Implement ARIA live regions for form validation feedback",
        logged_by="Sarah Chen",
        status=Status.OPEN,
        created_at="2024-06-06T11:10:00+00:00",
        updated_at="2024-06-06T11:10:00+00:00",
    ),
]


def seed_demo_data(store: CollectionStore) -> bool:
    """Write demo data if projects were never saved. Returns True when seeded."""
    if project_repo.exists(store):
        return False
    project_repo.save_all(store, list(DEMO_PROJECTS))
    if not debt_repo.load_all(store):
        debt_repo.save_all(store, list(DEMO_DEBT_ITEMS))
    logger.info("Seeded demo data (%d projects)", len(DEMO_PROJECTS))
    return True
