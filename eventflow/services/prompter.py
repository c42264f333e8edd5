import datetime
from typing import Callable, Optional

import click
from loguru import logger

from eventflow.config import Settings
from eventflow.models.schemas import EventDetails


def _required(message: str) -> Callable[[str], str]:
    def validate(value: str) -> str:
        value = (value or "").strip()
        if not value:
            raise click.BadParameter(message)
        return value
    return validate


def parse_event_date(value: str) -> datetime.date:
    value = (value or "").strip()
    if not value:
        raise click.BadParameter("You must input a date for the event!")
    try:
        return datetime.date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter("You must input a valid date for the event!")


class EventPrompter:
    """Asks the organizer for the event details, re-prompting on invalid answers."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def _ask(self, text: str, value_proc: Callable, default: Optional[str] = None):
        return click.prompt(text, default=default, value_proc=value_proc, show_default=bool(default))

    def collect(self) -> EventDetails:
        default_location = self.settings.DEFAULT_EVENT_LOCATION
        answers = {
            "event_name": self._ask(
                "What is the name of the event?",
                _required("You must input a name for the event!"),
            ),
            "event_location_name": self._ask(
                "What is the name of the location of the event?",
                _required("You must input a location name for the event!"),
                default=default_location,
            ),
            "event_location": self._ask(
                "Where will the event be located?",
                _required("You must input a location for the event!"),
                default=default_location,
            ),
            "event_date": self._ask(
                "What date will the event be on? (YYYY-MM-DD)",
                parse_event_date,
            ),
            "event_time": self._ask(
                "What time will the event be?",
                _required("You must input a time for the event!"),
                default=self.settings.DEFAULT_EVENT_TIME,
            ),
            "event_id": self._ask(
                "What is the Eventbrite ID for this event?",
                lambda v: (v or "").strip(),
                default="",
            ),
        }
        details = EventDetails(**answers)
        logger.info(f"Collected event details: {details.model_dump()}")
        return details
