"""Journey repository for database operations."""

from dataclasses import dataclass
from typing import cast

from sqlalchemy import delete, func, select
from sqlalchemy.sql.expression import ColumnElement

from learng.models import JourneyDB, ScenarioDB, WordDB
from learng.repositories.base import BaseRepository
from learng.schemas import JourneyCreate


@dataclass(frozen=True)
class JourneyFilters:
    """Optional equality filters for journey listings."""

    status: str | None = None
    created_by: str | None = None

    def clauses(self) -> list[ColumnElement[bool]]:
        conditions: list[ColumnElement[bool]] = []
        if self.status:
            conditions.append(cast(ColumnElement[bool], JourneyDB.status == self.status))
        if self.created_by:
            conditions.append(
                cast(ColumnElement[bool], JourneyDB.created_by == self.created_by),
            )
        return conditions


class JourneyRepository(BaseRepository[JourneyDB, JourneyCreate]):
    """Repository for journeys, the roots of the content tree."""

    model = JourneyDB

    async def list_journeys(
        self,
        filters: JourneyFilters,
        page: int,
        limit: int,
    ) -> tuple[list[JourneyDB], int]:
        """
        Get one page of journeys, newest first.

        Args:
            filters: Equality filters to apply
            page: 1-based page number
            limit: Page size

        Returns:
            tuple[list[JourneyDB], int]: The page and the total matching count
        """
        conditions = filters.clauses()

        count_statement = select(func.count()).select_from(JourneyDB).where(*conditions)
        total = (await self.session.execute(count_statement)).scalar() or 0

        statement = (
            select(JourneyDB)
            .where(*conditions)
            .order_by(JourneyDB.created_at.desc(), JourneyDB.id)  # type: ignore[attr-defined]
            .offset((page - 1) * limit)
            .limit(limit)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all()), total

    async def delete_cascade(self, journey_id: str) -> bool:
        """
        Delete a journey together with its scenarios and their words.

        Returns:
            bool: True if the journey existed
        """
        if not await self.exists(journey_id):
            return False

        scenario_ids = select(ScenarioDB.id).where(
            cast(ColumnElement[bool], ScenarioDB.journey_id == journey_id),
        )
        await self.session.execute(
            delete(WordDB).where(WordDB.scenario_id.in_(scenario_ids)),  # type: ignore[attr-defined]
        )
        await self.session.execute(
            delete(ScenarioDB).where(
                cast(ColumnElement[bool], ScenarioDB.journey_id == journey_id),
            ),
        )
        await self.session.execute(
            delete(JourneyDB).where(cast(ColumnElement[bool], JourneyDB.id == journey_id)),
        )
        await self.session.flush()
        return True
