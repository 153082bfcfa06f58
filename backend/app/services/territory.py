"""Read-only lookups over the Zone -> Thana -> Area directory.

Unknown keys yield an empty list rather than an error so cascading selects can
treat "no entries" as a normal result.
"""

from backend.app.data.locations import LOCATIONS


def zones() -> list[str]:
    return list(LOCATIONS)


def thanas_of(zone: str | None) -> list[str]:
    return list(LOCATIONS.get(zone, {}))


def areas_of(zone: str | None, thana: str | None) -> list[str]:
    return list(LOCATIONS.get(zone, {}).get(thana, []))
