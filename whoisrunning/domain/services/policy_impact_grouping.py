"""Grouping and summary of policy impacts for display."""

from collections.abc import Iterable

from whoisrunning.domain.value_objects.demographic_profile import DemographicProfile
from whoisrunning.domain.value_objects.policy_impact import PolicyCategory, PolicyImpact


def group_impacts_by_category(
    impacts: Iterable[PolicyImpact],
) -> dict[PolicyCategory, list[PolicyImpact]]:
    """Group impacts by category.

    Categories appear in order of first occurrence and each list keeps the
    input order. Categories without impacts are absent.
    """
    grouped: dict[PolicyCategory, list[PolicyImpact]] = {}
    for impact in impacts:
        grouped.setdefault(impact.category, []).append(impact)
    return grouped


def summarize_impacts(profile: DemographicProfile, impacts: list[PolicyImpact]) -> str:
    """One-paragraph summary of what the analysis found for the profile."""
    categories = list(group_impacts_by_category(impacts))
    category_names = ", ".join(category.value for category in categories)
    return (
        f"Based on your demographic profile ({profile.age_range.value}, "
        f"{profile.income_range.label}) in {profile.location.display()}, "
        f"we found {len(impacts)} relevant policy impacts across "
        f"{len(categories)} categories: {category_names}. These policies directly "
        "affect your daily life, from taxes and healthcare to education and employment."
    )
