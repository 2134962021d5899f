"""Scenario repository for database operations."""

from typing import cast

from sqlalchemy import delete, select
from sqlalchemy.sql.expression import ColumnElement

from learng.models import ScenarioDB, WordDB
from learng.repositories.base import BaseRepository
from learng.schemas import ScenarioCreate


class ScenarioRepository(BaseRepository[ScenarioDB, ScenarioCreate]):
    """Repository for scenarios."""

    model = ScenarioDB

    async def list_by_journey(self, journey_id: str) -> list[ScenarioDB]:
        """Get the scenarios of a journey in display order."""
        statement = (
            select(ScenarioDB)
            .where(cast(ColumnElement[bool], ScenarioDB.journey_id == journey_id))
            .order_by(ScenarioDB.display_order, ScenarioDB.created_at)  # type: ignore[arg-type]
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def delete_cascade(self, scenario_id: str) -> bool:
        """
        Delete a scenario together with its words.

        Returns:
            bool: True if the scenario existed
        """
        if not await self.exists(scenario_id):
            return False

        await self.session.execute(
            delete(WordDB).where(cast(ColumnElement[bool], WordDB.scenario_id == scenario_id)),
        )
        await self.session.execute(
            delete(ScenarioDB).where(cast(ColumnElement[bool], ScenarioDB.id == scenario_id)),
        )
        await self.session.flush()
        return True
