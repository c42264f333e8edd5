import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class EventDetails(BaseModel):
    """Answers collected by the interactive prompts."""
    event_name: str = Field(..., min_length=1)
    event_location_name: str = Field(..., min_length=1)
    event_location: str = Field(..., min_length=1)
    event_date: datetime.date
    event_time: str = Field(..., min_length=1)
    event_id: str = ""


class Coordinates(BaseModel):
    lat: float
    lng: float


class CalendarEntry(BaseModel):
    """One row of the NodeSchool calendar form."""
    name: str
    location: str
    coordinates: Coordinates
    start_date: datetime.date
    website: str


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NextEvent(_CamelModel):
    day_of_the_week: str
    date: str
    time: str
    address: str
    mentors_url: str
    tickets_url: str
    address_url_safe: Optional[str] = None


class SiteData(_CamelModel):
    generated_at: int  # epoch millis
    next_event: NextEvent

    def to_json_dict(self) -> dict:
        # addressUrlSafe is left out entirely when unset
        return self.model_dump(by_alias=True, exclude_none=True)
