"""In-memory repository for homework assignments."""

from __future__ import annotations

import logging
from datetime import datetime

from homework_scheduler.domain.errors import NotFoundError, ValidationError
from homework_scheduler.domain.models import (
    Homework,
    HomeworkDraft,
    HomeworkUpdate,
    Subject,
)
from homework_scheduler.services.validation import parse_subject, to_day

logger = logging.getLogger(__name__)


class HomeworkRepository:
    """Dict-backed store for Homework instances, keyed by id.

    Writes are last-write-wins; there is no optimistic concurrency check.
    """

    def __init__(self) -> None:
        self._store: dict[str, Homework] = {}

    def add(self, homework: Homework) -> None:
        self._store[homework.id] = homework

    def get(self, homework_id: str) -> Homework | None:
        return self._store.get(homework_id)

    def list_all(self) -> list[Homework]:
        """Return all homework ordered by due day (insertion order on ties)."""
        return sorted(self._store.values(), key=lambda hw: to_day(hw.due_date))

    def create(self, draft: HomeworkDraft) -> Homework:
        homework = Homework(
            subject=parse_subject(draft.subject),
            title=draft.title,
            description=draft.description,
            assigned_date=draft.assigned_date,
            due_date=draft.due_date,
            created_by=draft.created_by,
        )
        self.add(homework)
        logger.info(
            "Created homework %s (%s) due %s",
            homework.id,
            homework.title,
            homework.due_date.date(),
        )
        return homework

    def update(self, homework_id: str, changes: HomeworkUpdate) -> Homework:
        """Apply the fields set on *changes* and return the stored result."""
        current = self._store.get(homework_id)
        if current is None:
            raise NotFoundError("Homework not found")

        fields = changes.model_dump(exclude_unset=True, exclude_none=True)
        if "subject" in fields:
            fields["subject"] = parse_subject(fields["subject"])
        updated = current.model_copy(update=fields)
        if to_day(updated.assigned_date) > to_day(updated.due_date):
            raise ValidationError("due_date must not be before assigned_date")

        self._store[homework_id] = updated
        logger.info("Updated homework %s: %s", homework_id, sorted(fields))
        return updated

    def delete(self, homework_id: str) -> None:
        if self._store.pop(homework_id, None) is None:
            raise NotFoundError("Homework not found")
        logger.info("Deleted homework %s", homework_id)


# ---------------------------------------------------------------------------
# Seed data – the demo assignments shown on a fresh install
# ---------------------------------------------------------------------------

_SEED = [
    (Subject.WEB, "React Component Library", "Build a reusable component library with 10 components", 15, 22, "Prof. Smith"),
    (Subject.JAVA, "Spring Boot REST API", "Create a RESTful API with CRUD operations", 16, 25, "Prof. Johnson"),
    (Subject.DATABASE, "SQL Query Optimization", "Optimize 5 complex queries and write a report", 17, 24, "Prof. Williams"),
    (Subject.SPRING, "Dependency Injection Practice", "Implement DI patterns in a sample application", 18, 26, "Prof. Johnson"),
    (Subject.GIT, "Version Control Workflow", "Create a branching strategy document", 19, 23, "Prof. Davis"),
    (Subject.UX_UI, "Design System Creation", "Design a complete design system with components", 20, 27, "Prof. Martinez"),
    (Subject.DEPLOYMENT, "CI/CD Pipeline Setup", "Set up automated deployment pipeline", 21, 28, "Prof. Anderson"),
]


def _seed_homeworks(repo: HomeworkRepository) -> None:
    for subject, title, description, assigned_day, due_day, created_by in _SEED:
        repo.add(
            Homework(
                subject=subject,
                title=title,
                description=description,
                assigned_date=datetime(2024, 1, assigned_day),
                due_date=datetime(2024, 1, due_day),
                created_by=created_by,
            )
        )


def create_homework_repository() -> HomeworkRepository:
    """Return a HomeworkRepository pre-loaded with sample data."""
    repo = HomeworkRepository()
    _seed_homeworks(repo)
    return repo
