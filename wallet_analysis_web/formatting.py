"""Display helpers used by the page template."""
import math
from datetime import datetime, timezone
from typing import Any, Optional

from babel import Locale
from babel.dates import format_datetime, get_timezone
from babel.numbers import format_currency as _babel_currency
from babel.numbers import format_decimal, format_percent

from wallet_analysis_web.config import DEFAULT_LOCALE, DEFAULT_TIMEZONE

PLACEHOLDER = "-"
DATETIME_PATTERN = "dd.MM.yyyy HH:mm:ss"


def _to_number(value: Any) -> Optional[float]:
    """Parse a decimal string (or number) from the API; None when it isn't one."""
    if value is None or isinstance(value, bool):
        return None
    try:
        num = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(num) or math.isinf(num):
        return None
    return num


def _two_decimal_pattern(pattern: str) -> str:
    # "%#,##0" -> "%#,##0.00", "#,##0%" -> "#,##0.00%"
    idx = pattern.rfind("0")
    if idx == -1:
        return pattern
    return pattern[:idx + 1] + ".00" + pattern[idx + 1:]


def format_currency(value: Any, locale: str = DEFAULT_LOCALE) -> str:
    """USD amount with exactly two decimals in the locale's currency pattern."""
    num = _to_number(value)
    if num is None:
        return PLACEHOLDER
    return _babel_currency(num, "USD", locale=locale)


def format_percentage(value: Any, locale: str = DEFAULT_LOCALE) -> str:
    """
    Format a whole-number percent ("12.5" means 12.5%) with two decimals.

    The locale decides where the percent sign goes (tr_TR puts it in front).
    """
    num = _to_number(value)
    if num is None:
        return PLACEHOLDER
    pattern = Locale.parse(locale).percent_formats[None].pattern
    return format_percent(num / 100, format=_two_decimal_pattern(pattern), locale=locale)


def format_amount(value: Any, locale: str = DEFAULT_LOCALE) -> str:
    num = _to_number(value)
    if num is None:
        return PLACEHOLDER
    return format_decimal(num, format="#,##0.###", locale=locale)


def format_unix_time(timestamp: Any, locale: str = DEFAULT_LOCALE, tz: str = DEFAULT_TIMEZONE) -> str:
    """Unix seconds as a local date-time; "-" when the timestamp is 0, missing or out of range."""
    num = _to_number(timestamp)
    if not num:
        return PLACEHOLDER
    try:
        moment = datetime.fromtimestamp(num, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return PLACEHOLDER
    return format_datetime(moment, format=DATETIME_PATTERN, tzinfo=get_timezone(tz), locale=locale)


def format_share(count: Any, total: Any) -> str:
    """Share of count in total with one decimal, "0.0%" when total is zero."""
    count_num = _to_number(count) or 0.0
    total_num = _to_number(total) or 0.0
    if total_num == 0:
        return "0.0%"
    return f"{count_num / total_num * 100:.1f}%"


def short_address(address: Optional[str], keep: int = 6) -> str:
    if not address:
        return PLACEHOLDER
    if len(address) <= keep * 2:
        return address
    return f"{address[:keep]}...{address[-keep:]}"


def is_gain(value: Any) -> bool:
    """True for zero or positive profit/ROI, which the page colours green."""
    num = _to_number(value)
    return num is not None and num >= 0
