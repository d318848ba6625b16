"""Domain value objects."""

from whoisrunning.domain.value_objects.analytics import (
    ElectedOfficial,
    TrendDirection,
    TrendingEntry,
    WinnerEntry,
)
from whoisrunning.domain.value_objects.candidate import (
    Candidate,
    Quote,
    Resource,
    ResourceType,
    SocialLinks,
)
from whoisrunning.domain.value_objects.demographic_profile import (
    AgeRange,
    DemographicProfile,
    EducationLevel,
    IncomeRange,
    Location,
    RaceEthnicity,
)
from whoisrunning.domain.value_objects.metric_value import MetricValue, Provenance
from whoisrunning.domain.value_objects.party import Party
from whoisrunning.domain.value_objects.policy_impact import (
    POLICY_CATEGORIES,
    PolicyCategory,
    PolicyImpact,
)


__all__ = [
    "AgeRange",
    "Candidate",
    "DemographicProfile",
    "EducationLevel",
    "ElectedOfficial",
    "IncomeRange",
    "Location",
    "MetricValue",
    "POLICY_CATEGORIES",
    "Party",
    "PolicyCategory",
    "PolicyImpact",
    "Provenance",
    "Quote",
    "RaceEthnicity",
    "Resource",
    "ResourceType",
    "SocialLinks",
    "TrendDirection",
    "TrendingEntry",
    "WinnerEntry",
]
