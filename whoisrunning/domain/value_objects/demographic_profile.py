"""Demographic profile submitted for a policy impact analysis."""

from dataclasses import dataclass
from enum import Enum


class AgeRange(Enum):
    AGE_18_24 = "18-24"
    AGE_25_34 = "25-34"
    AGE_35_44 = "35-44"
    AGE_45_54 = "45-54"
    AGE_55_64 = "55-64"
    AGE_65_PLUS = "65+"


class IncomeRange(Enum):
    UNDER_25K = "<25k"
    FROM_25K_TO_50K = "25-50k"
    FROM_50K_TO_75K = "50-75k"
    FROM_75K_TO_100K = "75-100k"
    FROM_100K_TO_150K = "100-150k"
    OVER_150K = "150k+"

    @property
    def label(self) -> str:
        return _INCOME_LABELS[self]


_INCOME_LABELS: dict[IncomeRange, str] = {
    IncomeRange.UNDER_25K: "Less than $25,000",
    IncomeRange.FROM_25K_TO_50K: "$25,000 - $50,000",
    IncomeRange.FROM_50K_TO_75K: "$50,000 - $75,000",
    IncomeRange.FROM_75K_TO_100K: "$75,000 - $100,000",
    IncomeRange.FROM_100K_TO_150K: "$100,000 - $150,000",
    IncomeRange.OVER_150K: "$150,000 or more",
}


class RaceEthnicity(Enum):
    WHITE = "White"
    BLACK = "Black or African American"
    HISPANIC = "Hispanic or Latino"
    ASIAN = "Asian"
    NATIVE_AMERICAN = "Native American or Alaska Native"
    PACIFIC_ISLANDER = "Native Hawaiian or Pacific Islander"
    MULTIRACIAL = "Two or More Races"
    OTHER = "Other"
    UNDISCLOSED = "Prefer not to say"


class EducationLevel(Enum):
    HIGH_SCHOOL = "High School or Less"
    SOME_COLLEGE = "Some College"
    BACHELORS = "Bachelor's Degree"
    GRADUATE = "Graduate Degree"


@dataclass(frozen=True)
class Location:
    """A state with optional county and city."""

    state: str
    county: str | None = None
    city: str | None = None

    def __post_init__(self) -> None:
        if not self.state or not self.state.strip():
            raise ValueError("Location requires at least a state")

    def display(self) -> str:
        """City, county, state joined with commas, empty parts omitted."""
        parts = [self.city, self.county, self.state]
        return ", ".join(p for p in parts if p)


@dataclass(frozen=True)
class DemographicProfile:
    """Demographic attributes used to tailor the impact report."""

    age_range: AgeRange
    income_range: IncomeRange
    race_ethnicity: RaceEthnicity
    education_level: EducationLevel
    location: Location
