"""Campus record models and the fixed-shape hits container returned by search."""

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int


class ScheduleEntry(_Record):
    title: str | None = None
    location: str | None = None
    start: str | None = Field(None, description="Start time as stored, e.g. 2025-09-15 10:00")
    end: str | None = Field(None, description="End time as stored")
    details: str | None = None


class FacilityEntry(_Record):
    name: str | None = None
    type: str | None = Field(None, description="Facility category, e.g. Recreation")
    location: str | None = None
    hours: str | None = None
    details: str | None = None


class DiningEntry(_Record):
    name: str | None = None
    cuisine: str | None = None
    hours: str | None = None
    location: str | None = None
    details: str | None = None


class LibraryEntry(_Record):
    title: str | None = None
    author: str | None = None
    call_number: str | None = None
    status: str | None = Field(None, description="available, checked out, or other text")


class AdminEntry(_Record):
    office: str | None = None
    contact: str | None = None
    hours: str | None = None
    details: str | None = None


class CampusHits(BaseModel):
    """Matches per collection. Always carries all five collections, possibly empty."""

    schedules: list[ScheduleEntry] = Field(default_factory=list)
    facilities: list[FacilityEntry] = Field(default_factory=list)
    dining: list[DiningEntry] = Field(default_factory=list)
    library: list[LibraryEntry] = Field(default_factory=list)
    admin: list[AdminEntry] = Field(default_factory=list)

    def by_collection(self) -> Iterator[tuple[str, list[_Record]]]:
        """Yield (collection_name, records) in fixed collection order."""
        for name in type(self).model_fields:
            yield name, getattr(self, name)

    def total(self) -> int:
        return sum(len(records) for _, records in self.by_collection())
