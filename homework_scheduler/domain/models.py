"""Domain models for the homework scheduler."""

from __future__ import annotations

import uuid
from datetime import date, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class Subject(StrEnum):
    WEB = "Web"
    JAVA = "Java"
    SPRING = "Spring"
    DATABASE = "Database"
    GIT = "Git"
    UX_UI = "UX/UI"
    DEPLOYMENT = "Deployment"


class ConflictKind(StrEnum):
    """Kinds of conflict warning, declared in priority order."""

    SAME_DAY = "sameDay"


def _new_id() -> str:
    return str(uuid.uuid4())


class WireModel(BaseModel):
    """Serializes with camelCase keys; accepts camelCase or snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Core domain models
# ---------------------------------------------------------------------------


class Homework(WireModel):
    id: str = Field(default_factory=_new_id)
    subject: Subject
    title: str = Field(min_length=1)
    description: str = ""
    assigned_date: datetime
    due_date: datetime
    created_by: str = Field(min_length=1)


class ConflictWarning(WireModel):
    kind: ConflictKind = Field(alias="type")
    message: str
    affected_dates: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Request / Response DTOs
# ---------------------------------------------------------------------------


class HomeworkDraft(WireModel):
    subject: Subject
    title: str = Field(min_length=1)
    description: str = ""
    assigned_date: datetime
    due_date: datetime
    created_by: str = Field(min_length=1)

    @model_validator(mode="after")
    def _due_not_before_assigned(self) -> HomeworkDraft:
        if self.assigned_date.date() > self.due_date.date():
            raise ValueError("due_date must not be before assigned_date")
        return self


class HomeworkUpdate(WireModel):
    subject: Subject | None = None
    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    assigned_date: datetime | None = None
    due_date: datetime | None = None
    created_by: str | None = Field(default=None, min_length=1)


class ConflictCheckRequest(WireModel):
    due_date: str | None = None
    id: str | None = None


class CalendarCell(WireModel):
    day: date
    homeworks: list[Homework] = Field(default_factory=list)


class CalendarMonth(WireModel):
    year: int
    month: int
    leading_blanks: int
    cells: list[CalendarCell]


class DayAgenda(WireModel):
    day: date
    homeworks: list[Homework]
