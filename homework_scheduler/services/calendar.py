"""Calendar views built on range membership: month grid and upcoming list."""

from __future__ import annotations

import calendar
from datetime import date
from itertools import groupby
from typing import Iterable

from homework_scheduler.domain.errors import ValidationError
from homework_scheduler.domain.models import (
    CalendarCell,
    CalendarMonth,
    DayAgenda,
    Homework,
    Subject,
)
from homework_scheduler.services.ranges import active_on
from homework_scheduler.services.validation import DateValue, to_day


def month_grid(
    year: int,
    month: int,
    homeworks: Iterable[Homework],
    subjects: Iterable[Subject | str] | None = None,
) -> CalendarMonth:
    """Populate one cell per day of the month with the homework active on it.

    Weeks start on Sunday; ``leading_blanks`` is the number of empty cells
    shown before the 1st.
    """
    if not 1 <= month <= 12 or not date.min.year <= year <= date.max.year:
        raise ValidationError(f"Invalid month: {year}-{month}")

    homeworks = list(homeworks)
    subjects = None if subjects is None else list(subjects)
    first_weekday, days_in_month = calendar.monthrange(year, month)

    cells = []
    for day_number in range(1, days_in_month + 1):
        day = date(year, month, day_number)
        cells.append(CalendarCell(day=day, homeworks=active_on(day, homeworks, subjects)))

    return CalendarMonth(
        year=year,
        month=month,
        leading_blanks=(first_weekday + 1) % 7,
        cells=cells,
    )


def upcoming(homeworks: Iterable[Homework], today: DateValue) -> list[DayAgenda]:
    """Group homework due today or later by due day, earliest first."""
    start = to_day(today, "today")
    pending = sorted(
        (hw for hw in homeworks if to_day(hw.due_date, "due_date") >= start),
        key=lambda hw: to_day(hw.due_date, "due_date"),
    )
    return [
        DayAgenda(day=day, homeworks=list(group))
        for day, group in groupby(pending, key=lambda hw: to_day(hw.due_date, "due_date"))
    ]
