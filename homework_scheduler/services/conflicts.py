"""Service for detecting scheduling conflicts between homework assignments."""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Iterable, Protocol

from homework_scheduler.domain.errors import StoreError
from homework_scheduler.domain.models import ConflictKind, ConflictWarning, Homework
from homework_scheduler.services.validation import DateValue, display_date, to_day

logger = logging.getLogger(__name__)

_KIND_ORDER = {kind: position for position, kind in enumerate(ConflictKind)}


class ConflictCandidate(Protocol):
    due_date: DateValue | None


def _same_day(
    candidate: ConflictCandidate, due_day: date, others: list[Homework]
) -> ConflictWarning | None:
    same_day = [hw for hw in others if to_day(hw.due_date, "due_date") == due_day]
    if not same_day:
        return None
    return ConflictWarning(
        kind=ConflictKind.SAME_DAY,
        message=f"{len(same_day)} other homework assignment(s) due on the same day",
        affected_dates=[display_date(candidate.due_date)],
    )


_RULES = (_same_day,)


def detect_conflicts(
    candidate: ConflictCandidate,
    existing: Iterable[Homework],
    exclude_id: str | None = None,
) -> list[ConflictWarning]:
    """Return advisory warnings for *candidate* against *existing* homework.

    An existing homework whose id equals *exclude_id* is skipped, so that an
    assignment being edited does not collide with itself. Warnings come back
    in ``ConflictKind`` declaration order. Raises ``ValidationError`` when the
    candidate's due date is missing or unparseable.
    """
    due_day = to_day(getattr(candidate, "due_date", None), "dueDate")
    others = [hw for hw in existing if exclude_id is None or hw.id != exclude_id]

    warnings: list[ConflictWarning] = []
    for rule in _RULES:
        warning = rule(candidate, due_day, others)
        if warning is not None:
            warnings.append(warning)
    return sorted(warnings, key=lambda w: _KIND_ORDER[w.kind])


def preview_conflicts(
    candidate: ConflictCandidate,
    existing: Iterable[Homework],
    fetch_authoritative: Callable[[], list[ConflictWarning]],
    exclude_id: str | None = None,
) -> list[ConflictWarning]:
    """Ask the authoritative check, falling back to a local computation.

    The fallback runs ``detect_conflicts`` over the caller's snapshot, which
    may disagree with the server. Validation errors are not swallowed.
    """
    try:
        return fetch_authoritative()
    except StoreError as exc:
        logger.warning("Conflict check unavailable, using local snapshot: %s", exc)
        return detect_conflicts(candidate, existing, exclude_id)
