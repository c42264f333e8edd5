"""
Date and text helpers shared by the steps and the site data writer.
"""
import datetime
from urllib.parse import quote

TBD = "tbd"

# Characters JavaScript's encodeURIComponent leaves untouched besides alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"


def is_tbd(value: str) -> bool:
    """True when `value` is the 'to be determined' placeholder, in any case."""
    return (value or "").strip().casefold() == TBD


def ordinal(day: int) -> str:
    """1 -> '1st', 2 -> '2nd', 11 -> '11th', 23 -> '23rd'."""
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def format_long_date(value: datetime.date) -> str:
    """Month name and ordinal day, e.g. 'March 10th'."""
    return f"{value.strftime('%B')} {ordinal(value.day)}"


def format_weekday(value: datetime.date) -> str:
    return value.strftime("%A")


def format_form_date(value: datetime.date) -> str:
    """Digits typed into a Google Forms date input (MMDDYYYY)."""
    return value.strftime("%m%d%Y")


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def epoch_millis(moment: datetime.datetime = None) -> int:
    moment = moment or datetime.datetime.now(datetime.timezone.utc)
    return int(moment.timestamp() * 1000)
