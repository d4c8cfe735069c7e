"""Abstract source of raw catalogue records.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete sources (CSV, JSON) live in the
infrastructure layer and only decode files; validation happens when
the records are turned into CatalogueItems.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ItemRecord:
    """One decoded, not yet validated, catalogue row."""

    name: str
    price: str | float | int
    description: str | None = None


class CatalogueSource(ABC):

    @abstractmethod
    def load_records(self) -> list[ItemRecord]:
        """Return every item record in source order."""
