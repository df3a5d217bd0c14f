"""
project_service.py - Project logic
Single responsibility: project CRUD, name resolution and per-project counts.
"""
import logging
import uuid

from uxdebt.config import UNKNOWN_PROJECT_LABEL
from uxdebt.database.repositories import projects as project_repo
from uxdebt.database.store import CollectionStore
from uxdebt.domain.errors import NotFoundError, PersistenceError, ValidationError
from uxdebt.domain.models import DebtItem, Project, Status
from uxdebt.utils.time import now_iso

logger = logging.getLogger(__name__)


class ProjectService:
    def __init__(self, store: CollectionStore):
        self.store = store
        self._projects: list[Project] = []
        self.reload()

    def reload(self) -> None:
        self._projects = project_repo.load_all(self.store)

    def _persist(self, project: Project | None = None) -> None:
        try:
            project_repo.save_all(self.store, self._projects)
        except PersistenceError as e:
            logger.error("Projects not saved; keeping in-memory change: %s", e)
            e.item = project
            raise

    def list_all(self) -> list[Project]:
        return list(self._projects)

    def get(self, project_id: str) -> Project:
        for p in self._projects:
            if p.id == project_id:
                return p
        raise NotFoundError("Project", project_id)

    def name_for(self, project_id: str) -> str:
        try:
            return self.get(project_id).name
        except NotFoundError:
            return UNKNOWN_PROJECT_LABEL

    def name_map(self) -> dict[str, str]:
        return {p.id: p.name for p in self._projects}

    def create(self, name: str, description: str = "") -> Project:
        name = (name or "").strip()
        if not name:
            raise ValidationError({"name": "Project name is required"})
        existing_ids = {p.id for p in self._projects}
        project_id = uuid.uuid4().hex
        while project_id in existing_ids:
            project_id = uuid.uuid4().hex
        project = Project(
            id=project_id,
            name=name,
            description=(description or "").strip(),
            created_at=now_iso(),
        )
        self._projects.append(project)
        logger.info("Created project %s (%s)", project.id, project.name)
        self._persist(project)
        return project

    def remove(self, project_id: str) -> None:
        """Drop a project. Its debt items are left in place."""
        remaining = [p for p in self._projects if p.id != project_id]
        if len(remaining) == len(self._projects):
            return
        self._projects = remaining
        self._persist()

    def status_counts(self, project_id: str, items: list[DebtItem]) -> dict[Status, int]:
        counts = {s: 0 for s in Status}
        for item in items:
            if item.project_id == project_id:
                counts[item.status] += 1
        return counts
