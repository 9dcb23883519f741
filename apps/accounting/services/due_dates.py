"""
Installment due-date projection.

Pure date arithmetic with no database access. The caller gathers the anchors
(sale schedule, previous installment) and passes them in.
"""

import calendar
from datetime import date, timedelta
from typing import Optional

WEEKLY = 'weekly'
BI_WEEKLY = 'bi-weekly'
SEMI_MONTHLY = 'semi-monthly'
MONTHLY = 'monthly'

_SCHEDULE_ALIASES = {
    'weekly': WEEKLY,
    'bi-weekly': BI_WEEKLY,
    'biweekly': BI_WEEKLY,
    'semi-monthly': SEMI_MONTHLY,
    'semimonthly': SEMI_MONTHLY,
}

SEMI_MONTHLY_FALLBACK_DAYS = 15


def normalize_schedule(schedule: Optional[str]) -> str:
    """Canonical schedule name. Anything unrecognised is monthly."""
    return _SCHEDULE_ALIASES.get((schedule or '').strip().lower(), MONTHLY)


def _clamped(year: int, month: int, day: int) -> date:
    return date(year, month, min(day, calendar.monthrange(year, month)[1]))


def add_months(value: date, months: int) -> date:
    """Shift by whole months, clamping to the last day of shorter months."""
    index = value.month - 1 + months
    return _clamped(value.year + index // 12, index % 12 + 1, value.day)


def _next_semi_monthly(prev_due: date, first_day: int, second_day: int) -> date:
    if prev_due.day == _clamped(prev_due.year, prev_due.month, first_day).day:
        candidate = _clamped(prev_due.year, prev_due.month, second_day)
        if candidate <= prev_due:
            following = add_months(prev_due.replace(day=1), 1)
            candidate = _clamped(following.year, following.month, second_day)
        return candidate

    following = add_months(prev_due.replace(day=1), 1)
    return _clamped(following.year, following.month, first_day)


def advance_due_date(
    prev_due: date,
    schedule: Optional[str],
    *,
    first_payment_date: Optional[date] = None,
    second_payment_date: Optional[date] = None,
) -> date:
    """
    Due date of the installment after one due on ``prev_due``.

    Weekly and bi-weekly add 7 and 14 days. Semi-monthly alternates between
    the days of month of the two payment anchors, or adds 15 days when either
    anchor is unknown. Monthly (the default) adds one calendar month.
    """
    kind = normalize_schedule(schedule)

    if kind == WEEKLY:
        return prev_due + timedelta(days=7)
    if kind == BI_WEEKLY:
        return prev_due + timedelta(days=14)
    if kind == SEMI_MONTHLY:
        if first_payment_date and second_payment_date:
            return _next_semi_monthly(prev_due, first_payment_date.day, second_payment_date.day)
        return prev_due + timedelta(days=SEMI_MONTHLY_FALLBACK_DAYS)
    return add_months(prev_due, 1)


def project_due_date(
    *,
    installment_number: int,
    schedule: Optional[str],
    today: date,
    explicit_due_date: Optional[date] = None,
    first_payment_date: Optional[date] = None,
    second_payment_date: Optional[date] = None,
    next_payment_due_date: Optional[date] = None,
    previous_due_date: Optional[date] = None,
) -> date:
    """
    Due date for installment ``installment_number`` of a sale.

    Args:
        installment_number: 1-based number of the installment being recorded
        schedule: Payment schedule name, matched case-insensitively
        today: Fallback when no anchor is known
        explicit_due_date: Date supplied with the payment; always wins
        first_payment_date: Schedule's first payment date
        second_payment_date: Second anchor for semi-monthly schedules
        next_payment_due_date: Next due date recorded on the sale
        previous_due_date: Due date of the latest recorded installment

    Returns:
        The projected due date; never None
    """
    if explicit_due_date:
        return explicit_due_date

    if installment_number <= 1:
        return first_payment_date or next_payment_due_date or today

    prev_due = previous_due_date or next_payment_due_date or first_payment_date
    if prev_due is None:
        return today

    return advance_due_date(
        prev_due,
        schedule,
        first_payment_date=first_payment_date,
        second_payment_date=second_payment_date,
    )
