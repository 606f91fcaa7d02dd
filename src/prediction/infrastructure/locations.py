"""
Static camera location configuration.
"""
from typing import Any, Iterable, Mapping, Tuple
from pydantic import ValidationError

from ..domain import Location
from ...common.exceptions import ConfigurationError

def load_locations(entries: Iterable[Mapping[str, Any]]) -> Tuple[Location, ...]:
    """
    Validates raw location entries into an immutable, ordered tuple.
    Names must be unique and the list non-empty.
    """
    locations = []
    seen = set()
    for i, entry in enumerate(entries):
        try:
            location = Location(**dict(entry))
        except (ValidationError, TypeError) as e:
            raise ConfigurationError(f"Invalid location at index {i}: {e}") from e
        if location.name in seen:
            raise ConfigurationError(f"Duplicate location name: {location.name}")
        seen.add(location.name)
        locations.append(location)

    if not locations:
        raise ConfigurationError("At least one location must be configured")
    return tuple(locations)


def network_center(locations: Iterable[Location]) -> Tuple[float, float]:
    """Mean latitude/longitude of the camera network."""
    locations = list(locations)
    if not locations:
        raise ValueError("Cannot compute the center of an empty network")
    lat = sum(loc.latitude for loc in locations) / len(locations)
    lon = sum(loc.longitude for loc in locations) / len(locations)
    return lat, lon
