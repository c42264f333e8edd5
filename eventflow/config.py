from pathlib import Path
from typing import Dict, List

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App Info
    APP_NAME: str = "EventFlow"
    APP_VERSION: str = "0.1.0"

    # Paths
    SITE_ROOT: Path = Field(default_factory=Path.cwd)
    SITE_DATA_FILE: Path = Path("docs-src") / "data.json"
    LOG_DIR: Path = Path.home() / ".eventflow" / "logs"
    LOG_LEVEL: str = "WARNING"

    # Chapter
    CHAPTER_NAME: str = "NodeSchool Lahore"
    CHAPTER_LOCATION: str = "Lahore, Pakistan"
    CHAPTER_URL: str = "https://nodeschool.io/lahore"
    DEFAULT_EVENT_LOCATION: str = "TBD"
    DEFAULT_EVENT_TIME: str = "2-3PM"
    DEFAULT_EVENT_COORDS: Dict[str, float] = {"lat": 0.0, "lng": 0.0}

    # Ticketing
    EVENTBRITE_EVENT_URL: str = "https://www.eventbrite.com/e/"
    EVENTBRITE_ORGANIZER_URL: str = "https://www.eventbrite.com/o/nodeschool-lahore-17129186812"

    # GitHub (set via .env: NODESCHOOL_LHR_GITHUB_API_TOKEN=...)
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_ORG: str = "nodeschool"
    GITHUB_REPO: str = "lahore"
    GITHUB_API_TOKEN: str = Field(
        default="",
        validation_alias=AliasChoices("GITHUB_API_TOKEN", "NODESCHOOL_LHR_GITHUB_API_TOKEN"),
    )
    GITHUB_API_USER: str = Field(
        default="",
        validation_alias=AliasChoices("GITHUB_API_USER", "NODESCHOOL_LHR_GITHUB_API_USER"),
    )

    # Google Maps
    GOOGLE_MAPS_API_URL: str = "https://maps.googleapis.com/maps/api"
    GOOGLE_MAPS_API_KEY: str = Field(
        default="",
        validation_alias=AliasChoices("GOOGLE_MAPS_API_KEY", "NODESCHOOL_LHR_GOOGLE_MAPS_API_KEY"),
    )
    HTTP_TIMEOUT: float = 30.0

    # NodeSchool calendar (Google Form)
    # Test form: https://docs.google.com/forms/d/e/1FAIpQLSe2SK5Vzy82yB9SjLI5B3zfrR1QEaxyjyRGvVxWp_K66p31ZA/viewform
    CALENDAR_FORM_URL: str = (
        "https://docs.google.com/forms/d/e/1FAIpQLSfp2GU7mntDJtLGwSu84gd6EztBMwQuqXImtrCgjzjbJNKf2Q/viewform"
    )
    BROWSER_HEADLESS: bool = False
    BROWSER_TIMEOUT_MS: int = 30000

    # Site build commands (argv lists, override as JSON in env)
    SITE_BUILD_COMMAND: List[str] = ["npm", "run", "docs:build"]
    SOCIAL_IMAGE_COMMAND: List[str] = ["npm", "run", "docs:generate-social"]
    PUBLISH_COMMAND: List[str] = ["npm", "run", "docs:publish"]

    # Ordered step names; geocode, calendar and publish are opt-in
    PIPELINE_STEPS: List[str] = ["inquire", "mentor_issue", "website", "social_image"]

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def site_data_path(self) -> Path:
        if self.SITE_DATA_FILE.is_absolute():
            return self.SITE_DATA_FILE
        return self.SITE_ROOT / self.SITE_DATA_FILE

    def init_dirs(self):
        """Ensure the log directory exists."""
        self.LOG_DIR.mkdir(parents=True, exist_ok=True)
