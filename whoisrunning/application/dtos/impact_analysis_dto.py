"""Policy impact analysis DTOs."""

from dataclasses import dataclass
from datetime import datetime

from whoisrunning.domain.dtos.research_dto import Citation
from whoisrunning.domain.value_objects.demographic_profile import DemographicProfile
from whoisrunning.domain.value_objects.policy_impact import PolicyCategory, PolicyImpact


@dataclass(frozen=True)
class ImpactAnalysisResult:
    """Impacts of current policy on one demographic profile."""

    profile: DemographicProfile
    impacts: tuple[PolicyImpact, ...]
    grouped: dict[PolicyCategory, list[PolicyImpact]]
    summary: str
    citations: tuple[Citation, ...]
    timestamp: datetime
