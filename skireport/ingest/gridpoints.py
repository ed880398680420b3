"""Resort identifier to api.weather.gov gridpoint resolution."""

from dataclasses import dataclass

from skireport.config.schema import ResortConfig


@dataclass(frozen=True)
class Gridpoint:
    grid_id: str
    grid_x: int
    grid_y: int

    @classmethod
    def parse(cls, value: str) -> "Gridpoint":
        """Parse the 'SEW/164,66' form used in the resort table."""
        grid_id, coords = value.split("/", 1)
        x, y = coords.split(",", 1)
        return cls(grid_id=grid_id, grid_x=int(x), grid_y=int(y))

    def __str__(self) -> str:
        return f"{self.grid_id}/{self.grid_x},{self.grid_y}"


class GridpointResolver:
    def __init__(self, resorts: list[ResortConfig]):
        self._resorts = {r.id: r for r in resorts}

    def resolve(self, resort_id: str) -> Gridpoint | None:
        """Return the gridpoint for a resort, or None when unsupported.

        Unknown identifiers and resorts without a gridpoint are both
        unsupported.
        """
        resort = self._resorts.get(resort_id)
        if resort is None or resort.gridpoint is None:
            return None
        return Gridpoint.parse(resort.gridpoint)

    def resort_name(self, resort_id: str) -> str | None:
        resort = self._resorts.get(resort_id)
        return resort.name if resort is not None else None

    def resorts(self) -> list[ResortConfig]:
        return list(self._resorts.values())
