from datetime import date, datetime
from typing import Optional, Union

from dateutil.relativedelta import relativedelta

from shared.core.config import settings

DATE_FORMAT = "%Y-%m-%d"


def parse_date(value: Union[str, date, datetime, None]) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(value.strip(), DATE_FORMAT).date()


def derive_expiry_date(issue_date: Union[str, date, datetime], years: Optional[int] = None) -> Union[str, date]:
    """
    Expiry of a safety data sheet: issue date plus the validity period (5 years).

    The result keeps the calendar representation of the input, so a
    'YYYY-MM-DD' string gives back a string and a date gives back a date.
    29 February rolls back to 28 February in non-leap target years.
    """
    offset = relativedelta(years=settings.SDS_VALIDITY_YEARS if years is None else years)

    if isinstance(issue_date, str):
        return (parse_date(issue_date) + offset).strftime(DATE_FORMAT)
    if isinstance(issue_date, datetime):
        return issue_date.date() + offset
    return issue_date + offset
