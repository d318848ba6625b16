"""Party affiliation value object.

Text that names no party maps to a single unclassified case; each record
type decides how that case is displayed.
"""

from enum import Enum


class Party(Enum):
    """Party affiliation of a parsed record."""

    DEMOCRAT = "Democrat"
    REPUBLICAN = "Republican"
    INDEPENDENT = "Independent"
    LIBERTARIAN = "Libertarian"
    GREEN = "Green"
    UNCLASSIFIED = "Unclassified"

    def display(self, unclassified_label: str) -> str:
        """Return the display label, substituting the caller's default."""
        if self is Party.UNCLASSIFIED:
            return unclassified_label
        return self.value


# Display label for an unclassified party, per record type
CANDIDATE_UNCLASSIFIED_LABEL = "Other"
TRENDING_UNCLASSIFIED_LABEL = "Independent"
WINNER_UNCLASSIFIED_LABEL = "Independent"
OFFICIAL_UNCLASSIFIED_LABEL = "Unknown"
