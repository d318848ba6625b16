"""Contribution repository implementation using SQLAlchemy."""

import logging

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel as PydanticBaseModel
from pydantic import ConfigDict
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from whoisrunning.domain.entities.contribution import Contribution
from whoisrunning.domain.repositories.contribution_repository import (
    ContributionRepository,
)
from whoisrunning.infrastructure.exceptions import DatabaseError


logger = logging.getLogger(__name__)

_COLUMNS = """
    id,
    amount_cents,
    is_recurring,
    checkout_session_id,
    invoice_id,
    subscription_id,
    customer_id,
    customer_email,
    status,
    created_at,
    updated_at
"""


class ContributionModel(PydanticBaseModel):
    """Contribution database row."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    id: int | None = None
    amount_cents: int
    is_recurring: bool = False
    checkout_session_id: str | None = None
    invoice_id: str | None = None
    subscription_id: str | None = None
    customer_id: str | None = None
    customer_email: str | None = None
    status: str = Contribution.STATUS_ACTIVE
    created_at: datetime | None = None
    updated_at: datetime | None = None


def _row_to_dict(row: Any) -> dict[str, Any]:
    if hasattr(row, "_asdict"):
        return row._asdict()  # type: ignore[no-any-return]
    if hasattr(row, "_mapping"):
        return dict(row._mapping)
    return dict(row)


class ContributionRepositoryImpl(ContributionRepository):
    """Contribution repository implementation using SQLAlchemy."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session.

        Args:
            session: AsyncSession for database operations
        """
        self.session = session

    async def _fetch_one(
        self, where: str, params: dict[str, Any], operation: str
    ) -> Contribution | None:
        try:
            query = text(f"SELECT {_COLUMNS} FROM contributions WHERE {where}")
            result = await self.session.execute(query, params)
            row = result.first()
            return self._dict_to_entity(_row_to_dict(row)) if row else None
        except SQLAlchemyError as e:
            logger.error(f"Database error {operation}: {e}")
            raise DatabaseError(
                f"Failed {operation}", {**params, "error": str(e)}
            ) from e

    async def _fetch_all(
        self, sql: str, params: dict[str, Any], operation: str
    ) -> list[Contribution]:
        try:
            result = await self.session.execute(text(sql), params)
            return [self._dict_to_entity(_row_to_dict(row)) for row in result.fetchall()]
        except SQLAlchemyError as e:
            logger.error(f"Database error {operation}: {e}")
            raise DatabaseError(
                f"Failed {operation}", {**params, "error": str(e)}
            ) from e

    async def get_by_id(self, entity_id: int) -> Contribution | None:
        """Get contribution by ID."""
        return await self._fetch_one(
            "id = :id", {"id": entity_id}, "getting contribution by ID"
        )

    async def get_by_checkout_session_id(self, session_id: str) -> Contribution | None:
        return await self._fetch_one(
            "checkout_session_id = :session_id",
            {"session_id": session_id},
            "getting contribution by checkout session",
        )

    async def get_by_invoice_id(self, invoice_id: str) -> Contribution | None:
        return await self._fetch_one(
            "invoice_id = :invoice_id",
            {"invoice_id": invoice_id},
            "getting contribution by invoice",
        )

    async def get_by_subscription_id(self, subscription_id: str) -> list[Contribution]:
        return await self._fetch_all(
            f"""
            SELECT {_COLUMNS} FROM contributions
            WHERE subscription_id = :subscription_id
            ORDER BY created_at ASC, id ASC
            """,
            {"subscription_id": subscription_id},
            "getting contributions by subscription",
        )

    async def get_active(self) -> list[Contribution]:
        return await self._fetch_all(
            f"SELECT {_COLUMNS} FROM contributions WHERE status = :status ORDER BY id ASC",
            {"status": Contribution.STATUS_ACTIVE},
            "getting active contributions",
        )

    async def get_all(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[Contribution]:
        """Get all contributions.

        Args:
            limit: Maximum number of results
            offset: Number of results to skip
        """
        sql = f"SELECT {_COLUMNS} FROM contributions ORDER BY id ASC"
        params: dict[str, Any] = {}
        if limit is not None:
            sql += " LIMIT :limit OFFSET :offset"
            params = {"limit": limit, "offset": offset or 0}
        return await self._fetch_all(sql, params, "getting all contributions")

    async def create(self, entity: Contribution) -> Contribution:
        """Create a new contribution.

        Args:
            entity: Contribution entity to create

        Returns:
            Created Contribution entity with ID
        """
        try:
            query = text(f"""
                INSERT INTO contributions (
                    amount_cents, is_recurring,
                    checkout_session_id, invoice_id, subscription_id,
                    customer_id, customer_email, status,
                    created_at, updated_at
                )
                VALUES (
                    :amount_cents, :is_recurring,
                    :checkout_session_id, :invoice_id, :subscription_id,
                    :customer_id, :customer_email, :status,
                    :created_at, :updated_at
                )
                RETURNING {_COLUMNS}
            """)

            now = datetime.now(UTC)
            params = {
                **self._entity_params(entity),
                "created_at": entity.created_at or now,
                "updated_at": now,
            }

            result = await self.session.execute(query, params)
            await self.session.commit()

            row = result.first()
            if row:
                return self._dict_to_entity(_row_to_dict(row))
            raise RuntimeError("Failed to create contribution")

        except SQLAlchemyError as e:
            logger.error(f"Database error creating contribution: {e}")
            await self.session.rollback()
            raise DatabaseError(
                "Failed to create contribution",
                {"entity": str(entity), "error": str(e)},
            ) from e

    async def update(self, entity: Contribution) -> Contribution:
        """Update an existing contribution.

        Raises:
            ValueError: The entity has no ID or does not exist
        """
        if not entity.id:
            raise ValueError("Entity must have an ID to update")
        try:
            query = text(f"""
                UPDATE contributions
                SET amount_cents = :amount_cents,
                    is_recurring = :is_recurring,
                    checkout_session_id = :checkout_session_id,
                    invoice_id = :invoice_id,
                    subscription_id = :subscription_id,
                    customer_id = :customer_id,
                    customer_email = :customer_email,
                    status = :status,
                    updated_at = :updated_at
                WHERE id = :id
                RETURNING {_COLUMNS}
            """)

            params = {
                **self._entity_params(entity),
                "id": entity.id,
                "updated_at": datetime.now(UTC),
            }

            result = await self.session.execute(query, params)
            await self.session.commit()

            row = result.first()
            if row:
                return self._dict_to_entity(_row_to_dict(row))
            raise ValueError(f"Contribution with ID {entity.id} not found")

        except SQLAlchemyError as e:
            logger.error(f"Database error updating contribution: {e}")
            await self.session.rollback()
            raise DatabaseError(
                "Failed to update contribution",
                {"entity": str(entity), "error": str(e)},
            ) from e

    async def delete(self, entity_id: int) -> bool:
        """Delete a contribution by ID."""
        try:
            query = text("DELETE FROM contributions WHERE id = :id")
            result = await self.session.execute(query, {"id": entity_id})
            await self.session.commit()

            return result.rowcount > 0  # type: ignore[attr-defined]

        except SQLAlchemyError as e:
            logger.error(f"Database error deleting contribution: {e}")
            await self.session.rollback()
            raise DatabaseError(
                "Failed to delete contribution",
                {"id": entity_id, "error": str(e)},
            ) from e

    @staticmethod
    def _entity_params(entity: Contribution) -> dict[str, Any]:
        return {
            "amount_cents": entity.amount_cents,
            "is_recurring": entity.is_recurring,
            "checkout_session_id": entity.checkout_session_id,
            "invoice_id": entity.invoice_id,
            "subscription_id": entity.subscription_id,
            "customer_id": entity.customer_id,
            "customer_email": entity.customer_email,
            "status": entity.status,
        }

    def _dict_to_entity(self, data: dict[str, Any]) -> Contribution:
        """Convert a row dict to a domain entity via the row model."""
        model = ContributionModel.model_validate(data)
        return Contribution(
            id=model.id,
            amount_cents=model.amount_cents,
            is_recurring=model.is_recurring,
            checkout_session_id=model.checkout_session_id,
            invoice_id=model.invoice_id,
            subscription_id=model.subscription_id,
            customer_id=model.customer_id,
            customer_email=model.customer_email,
            status=model.status,
            created_at=model.created_at,
        )
