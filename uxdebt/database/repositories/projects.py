"""
projects.py - Project repository
Single responsibility: map Project objects to and from stored records.
"""

import logging

from uxdebt.config import PROJECTS_KEY
from uxdebt.database.store import CollectionStore
from uxdebt.domain.models import Project

logger = logging.getLogger(__name__)


def to_record(project: Project) -> dict:
    record = {
        "id": project.id,
        "name": project.name,
        "description": project.description or "",
    }
    if project.created_at:
        record["createdAt"] = project.created_at
    return record


def from_record(data: dict) -> Project:
    name = data["name"]
    description = data.get("description") or ""
    created_at = data.get("createdAt") or None
    if not isinstance(name, str) or not isinstance(description, str):
        raise TypeError(f"project {data.get('id')!r} has non-text name or description")
    if created_at is not None and not isinstance(created_at, str):
        raise TypeError(f"project {data.get('id')!r} has a non-text createdAt")
    return Project(
        id=str(data["id"]),
        name=name,
        description=description,
        created_at=created_at,
    )


def load_all(store: CollectionStore) -> list[Project]:
    projects: list[Project] = []
    for data in store.load(PROJECTS_KEY):
        try:
            projects.append(from_record(data))
        except (KeyError, TypeError, AttributeError) as e:
            logger.warning("Skipping malformed project record: %s", e)
    return projects


def save_all(store: CollectionStore, projects: list[Project]) -> None:
    store.save(PROJECTS_KEY, [to_record(p) for p in projects])


def exists(store: CollectionStore) -> bool:
    return store.has(PROJECTS_KEY)
