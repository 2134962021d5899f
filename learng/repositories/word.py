"""Word repository for database operations."""

from collections import defaultdict
from typing import cast

from sqlalchemy import select
from sqlalchemy.sql.expression import ColumnElement

from learng.models import WordDB
from learng.repositories.base import BaseRepository
from learng.schemas import WordCreate


class WordRepository(BaseRepository[WordDB, WordCreate]):
    """Repository for words."""

    model = WordDB

    async def list_by_scenario(self, scenario_id: str) -> list[WordDB]:
        """Get the words of a scenario in display order."""
        statement = (
            select(WordDB)
            .where(cast(ColumnElement[bool], WordDB.scenario_id == scenario_id))
            .order_by(WordDB.display_order, WordDB.created_at)  # type: ignore[arg-type]
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def list_by_scenarios(self, scenario_ids: list[str]) -> dict[str, list[WordDB]]:
        """
        Get the words of several scenarios in one query.

        Returns:
            dict[str, list[WordDB]]: Words per scenario id, each list in display order
        """
        grouped: dict[str, list[WordDB]] = defaultdict(list)
        if not scenario_ids:
            return grouped

        statement = (
            select(WordDB)
            .where(WordDB.scenario_id.in_(scenario_ids))  # type: ignore[attr-defined]
            .order_by(WordDB.display_order, WordDB.created_at)  # type: ignore[arg-type]
        )
        result = await self.session.execute(statement)
        for word in result.scalars().all():
            grouped[word.scenario_id].append(word)
        return grouped
