import calendar
from dataclasses import dataclass
from datetime import datetime
from typing import Tuple, Union


class InvalidMonthError(ValueError):
    """Raised when a month cannot be resolved from a name or number."""
    pass


@dataclass(frozen=True)
class PriceBucket:
    label: str
    min_price: float
    max_price: float


# Inclusive bounds; the last bucket is open ended
PRICE_BUCKETS: Tuple[PriceBucket, ...] = (
    PriceBucket("0-100", 0, 100),
    PriceBucket("101-200", 101, 200),
    PriceBucket("201-300", 201, 300),
    PriceBucket("301-400", 301, 400),
    PriceBucket("401-500", 401, 500),
    PriceBucket("501-600", 501, 600),
    PriceBucket("601-700", 601, 700),
    PriceBucket("701-800", 701, 800),
    PriceBucket("801-900", 801, 900),
    PriceBucket("901-above", 901, float(2 ** 53 - 1)),
)

_MONTH_LOOKUP = {}
for _number in range(1, 13):
    _MONTH_LOOKUP[calendar.month_name[_number].lower()] = _number
    _MONTH_LOOKUP[calendar.month_abbr[_number].lower()] = _number


def resolve_month(month: Union[str, int]) -> int:
    """
    Resolve a month given as a name ("March", "mar") or number (3, "3") to 1-12.

    Raises:
        InvalidMonthError: If the value does not name a calendar month.
    """
    if isinstance(month, int):
        number = month
    else:
        value = str(month).strip()
        if value.isdecimal():
            number = int(value)
        else:
            number = _MONTH_LOOKUP.get(value.lower(), 0)

    if not 1 <= number <= 12:
        raise InvalidMonthError(f"Unrecognised month: {month!r}")
    return number


def month_name(month: Union[str, int]) -> str:
    """Canonical English name for a month given as a name or number."""
    return calendar.month_name[resolve_month(month)]


def sale_period(month: Union[str, int], year: int) -> Tuple[datetime, datetime]:
    """Half-open [first of month, first of next month) range for a month of ``year``."""
    number = resolve_month(month)
    start = datetime(year, number, 1)
    if number == 12:
        end = datetime(year + 1, 1, 1)
    else:
        end = datetime(year, number + 1, 1)
    return start, end
