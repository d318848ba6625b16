"""Policy impact value objects for the demographic impact report."""

from dataclasses import dataclass
from enum import Enum


class PolicyCategory(str, Enum):
    """The seven policy areas covered by the impact report."""

    TAX_POLICIES = "Tax Policies"
    EDUCATION = "Education"
    HEALTHCARE = "Healthcare"
    HOUSING = "Housing"
    EMPLOYMENT = "Employment"
    TRANSPORTATION = "Transportation"
    SOCIAL_SERVICES = "Social Services"


POLICY_CATEGORIES: tuple[PolicyCategory, ...] = tuple(PolicyCategory)

TITLE_MAX_LENGTH = 100


@dataclass(frozen=True)
class PolicyImpact:
    """One policy point affecting the requested demographic."""

    category: PolicyCategory
    title: str
    description: str
    source: str | None = None
