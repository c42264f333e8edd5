import datetime
import json
from pathlib import Path

from loguru import logger

from eventflow.models.schemas import NextEvent, SiteData
from eventflow.utils.formatting import (
    encode_uri_component,
    epoch_millis,
    format_long_date,
    format_weekday,
    is_tbd,
)


def build_site_data(
    event_date: datetime.date,
    event_time: str,
    event_location_name: str,
    event_location: str,
    mentors_url: str,
    tickets_url: str,
    generated_at: int = None,
) -> SiteData:
    """Site data for the next event; addressUrlSafe only for a known venue."""
    next_event = NextEvent(
        day_of_the_week=format_weekday(event_date),
        date=format_long_date(event_date),
        time=event_time,
        address=f"{event_location_name} {event_location}",
        mentors_url=mentors_url,
        tickets_url=tickets_url,
    )
    if not is_tbd(event_location):
        next_event.address_url_safe = encode_uri_component(event_location)

    return SiteData(
        generated_at=generated_at if generated_at is not None else epoch_millis(),
        next_event=next_event,
    )


class SiteDataWriter:
    def __init__(self, path: Path):
        self.path = Path(path)

    def write(self, site_data: SiteData) -> Path:
        payload = site_data.to_json_dict()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
        logger.info(f"Wrote site data to {self.path}")
        return self.path
