"""
Cortical Zones Catalog
======================
The static data model behind the visualization: six layers of the developing
cerebral wall, ordered from the outermost (just below the Pia Mater) to the
innermost (bordering the ventricle).

Classes:
    ColorTag: Closed set of symbolic colors used for card styling.
    ZoneRecord: One zone (name, abbreviation, description, color).
    ZoneCatalog: Read-only ordered sequence of zone records.

Exports:
    CORTICAL_ZONES (ZoneCatalog): The catalog displayed by the application.
"""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Iterator, overload

logger = logging.getLogger(__name__)

MAX_ABBREVIATION_LENGTH: int = 4


# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class ColorTag(StrEnum):
    """Symbolic card colors. Resolved to RGB by the UI palette."""
    BLUE = "blue"
    PURPLE = "purple"
    ORANGE = "orange"
    GRAY = "gray"
    GREEN = "green"
    DARK_GREEN = "dark green"


# ------------------------------------------------------------------------------
# Data Structures
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class ZoneRecord:
    """A single zone of the cerebral wall, as shown on one card."""
    name: str
    abbreviation: str
    description: str
    color_tag: ColorTag
    # Stable key for the rendered card only; two records with equal content are equal.
    id: uuid.UUID = field(default_factory=uuid.uuid4, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Zone name must not be empty.")
        if not 1 <= len(self.abbreviation) <= MAX_ABBREVIATION_LENGTH:
            raise ValueError(
                f"Abbreviation '{self.abbreviation}' of zone '{self.name}' must have "
                f"1 to {MAX_ABBREVIATION_LENGTH} characters."
            )
        if not isinstance(self.color_tag, ColorTag):
            raise ValueError(f"Unknown color tag: {self.color_tag!r}")


class ZoneCatalog:
    """
    Immutable, ordered sequence of zone records.

    The declared order is the biological order (outermost first) and is the
    order in which cards are rendered. It is never re-sorted.
    """
    def __init__(self, records: tuple[ZoneRecord, ...] | list[ZoneRecord]) -> None:
        self._records: tuple[ZoneRecord, ...] = tuple(records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ZoneRecord]:
        return iter(self._records)

    @overload
    def __getitem__(self, index: int) -> ZoneRecord: ...
    @overload
    def __getitem__(self, index: slice) -> tuple[ZoneRecord, ...]: ...

    def __getitem__(self, index):
        return self._records[index]

    def __repr__(self) -> str:
        return f"ZoneCatalog({', '.join(self.abbreviations())})"

    @property
    def records(self) -> tuple[ZoneRecord, ...]:
        return self._records

    def abbreviations(self) -> list[str]:
        return [zone.abbreviation for zone in self._records]

    def names(self) -> list[str]:
        return [zone.name for zone in self._records]


# ------------------------------------------------------------------------------
# Catalog
# ------------------------------------------------------------------------------
CORTICAL_ZONES: ZoneCatalog = ZoneCatalog((
    ZoneRecord(
        name="Marginal Zone",
        abbreviation="MZ",
        description="The future Layer I. Home to Cajal-Retzius cells that secrete "
                    "vital migration signals like Reelin.",
        color_tag=ColorTag.BLUE,
    ),
    ZoneRecord(
        name="Cortical Plate",
        abbreviation="CP",
        description="The destination for migrating neurons, which form layers II-VI "
                    "of the neocortex in an 'inside-out' sequence.",
        color_tag=ColorTag.PURPLE,
    ),
    ZoneRecord(
        name="Subplate",
        abbreviation="SP",
        description="A transient layer beneath the cortical plate where early synaptic "
                    "connections are established, guiding thalamic axons.",
        color_tag=ColorTag.ORANGE,
    ),
    ZoneRecord(
        name="Intermediate Zone",
        abbreviation="IZ",
        description="The future white matter. Migrating neurons pass through this zone, "
                    "which is rich in axonal fibers.",
        color_tag=ColorTag.GRAY,
    ),
    ZoneRecord(
        name="Subventricular Zone",
        abbreviation="SVZ",
        description="A secondary progenitor zone that generates many of the neurons "
                    "destined for the upper cortical layers.",
        color_tag=ColorTag.GREEN,
    ),
    ZoneRecord(
        name="Ventricular Zone",
        abbreviation="VZ",
        description="The primary progenitor zone where neural stem cells (radial glia) "
                    "divide to produce neurons.",
        color_tag=ColorTag.DARK_GREEN,
    ),
))
