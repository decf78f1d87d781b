"""Train domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Train:
    """A single train run on one line and direction."""

    train_number: str
    service_type: str  # Service type tag, see ServiceType ("Q", "DF", "SFDF", "LU-VE NF")
    schedule: dict[str, str | None] | None  # station -> time of day, in this train's travel order

    def serves(self, station: str) -> bool:
        """Check whether this train has a time recorded at the given station."""
        return bool(self.schedule and self.schedule.get(station))

    @property
    def stations(self) -> list[str]:
        """Stations of this train's schedule, in travel order."""
        return list(self.schedule or {})
