"""Service deciding which homework is active on a given calendar day."""

from __future__ import annotations

from typing import Iterable

from homework_scheduler.domain.models import Homework, Subject
from homework_scheduler.services.validation import DateValue, parse_subject, to_day


def is_active_on(day: DateValue, homework: Homework) -> bool:
    """Return True if *day* falls within the homework's assigned-to-due span.

    Both ends are inclusive and all three values are compared as calendar
    days. An inverted span (assigned after due) contains no days.
    """
    target = to_day(day)
    assigned = to_day(homework.assigned_date, "assigned_date")
    due = to_day(homework.due_date, "due_date")
    return assigned <= target <= due


def active_on(
    day: DateValue,
    homeworks: Iterable[Homework],
    subjects: Iterable[Subject | str] | None = None,
) -> list[Homework]:
    """Return the homework active on *day*, in input order.

    When *subjects* is given, only homework of those subjects is kept; an
    empty collection hides everything.
    """
    target = to_day(day)
    allowed = None if subjects is None else {parse_subject(s) for s in subjects}
    return [
        hw
        for hw in homeworks
        if (allowed is None or hw.subject in allowed) and is_active_on(target, hw)
    ]
