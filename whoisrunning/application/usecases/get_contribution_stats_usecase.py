"""Contribution statistics use case."""

from whoisrunning.application.dtos.contribution_dto import ContributionStatsDTO
from whoisrunning.domain.repositories.contribution_repository import (
    ContributionRepository,
)


class GetContributionStatsUseCase:
    """Contributor count, total and average over active contributions."""

    def __init__(self, contribution_repository: ContributionRepository) -> None:
        self._repo = contribution_repository

    async def execute(self) -> ContributionStatsDTO:
        active = await self._repo.get_active()
        count = len(active)
        total = sum(c.amount_cents for c in active) / 100
        return ContributionStatsDTO(
            contributor_count=count,
            total_raised=total,
            average_contribution=total / count if count else 0.0,
        )
