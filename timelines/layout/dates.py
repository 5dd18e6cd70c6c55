"""
Turns free-text, in-world dates into a single orderable number.

Every date ends up on the same scale - fractional in-world years - whether the
writer typed a real calendar date ("2024-03-15"), a year with an era marker
("500 BCE") or a relative phrase ("Year 1, Day 5"). Text that carries no number
at all falls back to 0.0; callers break the resulting ties with the raw text so
ordering stays repeatable.
"""
import calendar
import math
import re
from datetime import datetime, timezone
from functools import lru_cache

FALLBACK_TIMESTAMP = 0.0

CALENDAR_FORMATS = [
    '%Y-%m-%d',
    '%Y-%m-%dT%H:%M',
    '%Y-%m-%dT%H:%M:%S',
    '%Y-%m-%d %H:%M',
    '%Y-%m-%d %H:%M:%S',
    '%Y-%m',
    '%B %d, %Y',
    '%b %d, %Y',
    '%B %d %Y',
    '%d %B %Y',
    '%d %b %Y',
    '%B %Y',
    '%b %Y',
    '%m/%d/%Y',
    # Day-first only when month-first is impossible (15/03/2024)
    '%d/%m/%Y',
]

# Full ISO timestamps with seconds fractions or an offset ("2024-03-15T10:00:00.000Z")
ISO_DATETIME_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}')

# Unit weights, expressed in years.
UNIT_WEIGHTS = {
    'millennium': 1000.0,
    'century': 100.0,
    'decade': 10.0,
    'year': 1.0,
    'season': 1.0 / 4,
    'month': 1.0 / 12,
    'week': 7.0 / 365,
    'day': 1.0 / 365,
    'hour': 1.0 / (365 * 24),
}

UNIT_ALIASES = [
    (r'millenni(?:um|a)', 'millennium'),
    (r'centur(?:y|ies)', 'century'),
    (r'decades?', 'decade'),
    (r'years?|yrs?', 'year'),
    (r'seasons?', 'season'),
    (r'months?', 'month'),
    (r'weeks?', 'week'),
    (r'days?', 'day'),
    (r'hours?|hrs?', 'hour'),
]

_NUMBER = r'[-+−]?\d+(?:\.\d+)?'
_UNIT = '|'.join(f'(?:{pattern})' for pattern, _ in UNIT_ALIASES)

UNIT_PATTERN = re.compile(
    rf'\b(?P<unit_first>{_UNIT})\.?\s*(?P<value_after>{_NUMBER})'
    rf'|(?P<value_before>{_NUMBER})\s*(?P<unit_after>{_UNIT})\b',
    re.IGNORECASE,
)
NUMBER_PATTERN = re.compile(rf'(?<![\d.]){_NUMBER}')
BEFORE_ERA_PATTERN = re.compile(r'(?<![A-Za-z])B\.?\s?C\.?(?:E\.?)?(?![A-Za-z])', re.IGNORECASE)


def parse_date_to_timestamp(text):
    """
    Resolves a date string to a float on the in-world year scale.
    Never raises: anything unparseable comes back as FALLBACK_TIMESTAMP.
    """
    if text is None:
        return FALLBACK_TIMESTAMP
    if not isinstance(text, str):
        text = str(text)
    return _parse(text.strip())


@lru_cache(maxsize=4096)
def _parse(text):
    if not text:
        return FALLBACK_TIMESTAMP

    # 1. Real calendar dates
    value = _parse_calendar_date(text)
    if value is None:
        # 2. "Year 2, Day 14" style compounds
        value = _parse_unit_phrase(text)
    if value is None:
        # 3. Bare year-like numbers, optionally with an era marker
        value = _parse_plain_number(text)

    if value is None or not math.isfinite(value):
        return FALLBACK_TIMESTAMP
    return value


def _parse_calendar_date(text):
    moment = _parse_iso_datetime(text)
    if moment is None:
        for fmt in CALENDAR_FORMATS:
            try:
                moment = datetime.strptime(text, fmt)
            except ValueError:
                continue
            break
    if moment is None:
        return None

    days_in_year = 366 if calendar.isleap(moment.year) else 365
    seconds = moment.hour * 3600 + moment.minute * 60 + moment.second + moment.microsecond / 1e6
    day_of_year = moment.timetuple().tm_yday - 1 + seconds / 86400
    return moment.year + day_of_year / days_in_year


def _parse_iso_datetime(text):
    if not ISO_DATETIME_PATTERN.match(text):
        return None
    if text[-1] in 'zZ':
        text = text[:-1] + '+00:00'
    try:
        moment = datetime.fromisoformat(text)
        if moment.tzinfo is not None:
            moment = moment.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return None
    return moment


def _unit_key(word):
    for pattern, key in UNIT_ALIASES:
        if re.fullmatch(pattern, word, re.IGNORECASE):
            return key
    return None


def _to_float(raw):
    return float(raw.replace('−', '-'))


def _parse_unit_phrase(text):
    matches = list(UNIT_PATTERN.finditer(text))
    if not matches:
        return None

    # Whole years and up carry the era; seasons, months and days count forward within the year
    years = within_year = 0.0
    for match in matches:
        unit = match.group('unit_first') or match.group('unit_after')
        raw = match.group('value_after') or match.group('value_before')
        try:
            amount = _to_float(raw)
        except (TypeError, ValueError, OverflowError):
            continue
        weight = UNIT_WEIGHTS[_unit_key(unit)]
        if weight >= 1:
            years += amount * weight
        else:
            within_year += amount * weight

    if BEFORE_ERA_PATTERN.search(text):
        if not years:
            return -abs(within_year)
        return -abs(years) + within_year
    return years + within_year


def _parse_plain_number(text):
    match = NUMBER_PATTERN.search(text)
    if not match:
        return None
    try:
        value = _to_float(match.group(0))
    except (ValueError, OverflowError):
        return None
    if BEFORE_ERA_PATTERN.search(text):
        value = -abs(value)
    return value


def timestamp_for(event):
    """Reads the start date from a model instance or an API dict and parses it."""
    return parse_date_to_timestamp(start_text_for(event))


def start_text_for(event):
    if isinstance(event, dict):
        return event.get('startDate', event.get('start_date')) or ''
    return getattr(event, 'start_date', '') or ''


def event_sort_key(timestamp, text, index):
    # Same timestamp (including the fallback) -> raw text, then original position.
    return (timestamp, text or '', index)
