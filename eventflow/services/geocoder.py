import requests
from loguru import logger

from eventflow.config import Settings
from eventflow.core.errors import ExternalServiceError
from eventflow.models.schemas import Coordinates


class GeocoderService:
    """Looks up venue coordinates with the Google Maps Geocoding API."""

    def __init__(self, settings: Settings):
        self.settings = settings

    @property
    def default_coordinates(self) -> Coordinates:
        return Coordinates(**self.settings.DEFAULT_EVENT_COORDS)

    def geocode(self, address: str) -> Coordinates:
        """
        Return the first result's location, or the default coordinates
        when the API finds nothing.
        """
        url = f"{self.settings.GOOGLE_MAPS_API_URL.rstrip('/')}/geocode/json"
        try:
            response = requests.get(
                url,
                params={"address": address, "key": self.settings.GOOGLE_MAPS_API_KEY},
                timeout=self.settings.HTTP_TIMEOUT,
            )
            response.raise_for_status()
            body = response.json()
        except requests.RequestException as e:
            raise ExternalServiceError("geocoder", f"Geocoding '{address}' failed: {e}") from e
        except ValueError as e:
            raise ExternalServiceError("geocoder", "Geocoding response was not JSON") from e

        try:
            location = body["results"][0]["geometry"]["location"]
            coords = Coordinates(lat=location["lat"], lng=location["lng"])
        except (KeyError, IndexError, TypeError):
            status = body.get("status") if isinstance(body, dict) else None
            logger.warning(f"[Geocoder] No result for '{address}' (status={status}), using default")
            return self.default_coordinates

        logger.debug(f"[Geocoder] {address} -> {coords.lat}, {coords.lng}")
        return coords
