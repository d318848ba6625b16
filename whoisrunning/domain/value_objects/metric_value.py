"""Numeric record fields tagged with where the number came from."""

from dataclasses import dataclass
from enum import Enum


class Provenance(Enum):
    """Origin of a numeric field value."""

    EXTRACTED = "extracted"
    ESTIMATED = "estimated"
    PLACEHOLDER = "placeholder"


@dataclass(frozen=True)
class MetricValue:
    """A number plus its provenance.

    ESTIMATED values are synthetic filler used when the research text has no
    numeric signal. PLACEHOLDER values belong to hardcoded fallback sets.
    """

    value: float
    provenance: Provenance

    @classmethod
    def extracted(cls, value: float) -> "MetricValue":
        return cls(value=value, provenance=Provenance.EXTRACTED)

    @classmethod
    def estimated(cls, value: float) -> "MetricValue":
        return cls(value=value, provenance=Provenance.ESTIMATED)

    @classmethod
    def placeholder(cls, value: float) -> "MetricValue":
        return cls(value=value, provenance=Provenance.PLACEHOLDER)

    @property
    def is_extracted(self) -> bool:
        return self.provenance is Provenance.EXTRACTED
