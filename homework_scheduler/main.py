"""FastAPI application: entry point for the homework scheduler service."""

from __future__ import annotations

import logging
import traceback
from datetime import date

from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse

from homework_scheduler.config import settings
from homework_scheduler.domain.errors import (
    NotFoundError,
    SchedulerError,
    StoreError,
    status_for,
)
from homework_scheduler.domain.models import (
    CalendarMonth,
    ConflictCheckRequest,
    ConflictWarning,
    DayAgenda,
    Homework,
    HomeworkDraft,
    HomeworkUpdate,
)
from homework_scheduler.logger import setup_logging
from homework_scheduler.repos.memory import HomeworkRepository, create_homework_repository
from homework_scheduler.services.calendar import month_grid, upcoming
from homework_scheduler.services.conflicts import detect_conflicts
from homework_scheduler.services.ranges import active_on
from homework_scheduler.services.validation import to_day

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Homework Scheduler")

# ── Singletons (created at import time for simplicity) ────────────────
homework_repo = (
    create_homework_repository() if settings.seed_demo_data else HomeworkRepository()
)


@app.exception_handler(SchedulerError)
async def handle_scheduler_error(request: Request, exc: SchedulerError) -> JSONResponse:
    """Render scheduler errors as ``{"detail": ...}`` with a mapped status."""
    if isinstance(exc, StoreError):
        logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc)
    content = {"detail": str(exc)}
    if settings.show_error_details:
        content["debug"] = "".join(traceback.format_exception(exc))
    return JSONResponse(status_code=status_for(exc), content=content)


# ── Routes ────────────────────────────────────────────────────────────


@app.get("/homeworks", response_model=list[Homework])
def list_homeworks() -> list[Homework]:
    """Return all homework ordered by due date."""
    return homework_repo.list_all()


@app.post("/homeworks", response_model=Homework, status_code=201)
def create_homework(draft: HomeworkDraft) -> Homework:
    return homework_repo.create(draft)


@app.post("/homeworks/check-conflicts", response_model=list[ConflictWarning])
def check_conflicts(payload: ConflictCheckRequest) -> list[ConflictWarning]:
    """Check a due date against the stored homework.

    Pass *id* when editing so the homework does not conflict with itself.
    """
    return detect_conflicts(payload, homework_repo.list_all(), exclude_id=payload.id)


@app.get("/homeworks/{homework_id}", response_model=Homework)
def get_homework(homework_id: str) -> Homework:
    homework = homework_repo.get(homework_id)
    if homework is None:
        raise NotFoundError("Homework not found")
    return homework


@app.put("/homeworks/{homework_id}", response_model=Homework)
def update_homework(homework_id: str, changes: HomeworkUpdate) -> Homework:
    return homework_repo.update(homework_id, changes)


@app.delete("/homeworks/{homework_id}")
def delete_homework(homework_id: str) -> dict:
    homework_repo.delete(homework_id)
    return {"status": "deleted"}


@app.get("/calendar/days/{day}", response_model=list[Homework])
def homework_on_day(
    day: str, subjects: list[str] | None = Query(default=None)
) -> list[Homework]:
    """Return homework active on *day*, optionally limited to some subjects."""
    return active_on(to_day(day, "day"), homework_repo.list_all(), subjects)


@app.get("/calendar/{year}/{month}", response_model=CalendarMonth)
def calendar_month(
    year: int, month: int, subjects: list[str] | None = Query(default=None)
) -> CalendarMonth:
    return month_grid(year, month, homework_repo.list_all(), subjects)


@app.get("/upcoming", response_model=list[DayAgenda])
def upcoming_homework(today: str | None = None) -> list[DayAgenda]:
    """Read-only student view: homework due today or later, grouped by day."""
    return upcoming(homework_repo.list_all(), today or date.today())
