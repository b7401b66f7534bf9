import datetime

from dateutil.relativedelta import relativedelta


def get_month_series(from_date: datetime.date, to_date: datetime.date):
    series = [from_date]
    current_date = from_date
    while current_date < to_date:
        current_date += relativedelta(months=1)
        series.append(current_date)
    return series


def get_last_month_starts(today: datetime.date, months: int):
    """The first day of each of the last ``months`` months, ending with the current one."""
    current = datetime.date(today.year, today.month, 1)
    return get_month_series(current - relativedelta(months=months - 1), current)


def display_date(value: datetime.date | None):
    if value is None:
        return None
    return f"{value:%b} {value.day}, {value.year}"


def is_within(value: datetime.date, start: datetime.date | None, end: datetime.date | None):
    """Inclusive of both bounds at day granularity."""
    if start and value < start:
        return False
    if end and value > end:
        return False
    return True
