"""Scenario database model using SQLModel."""

from datetime import datetime
from typing import cast

from sqlalchemy import DateTime, Integer
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel, String

from learng.utils.helpers import new_id, utc_now


class ScenarioDB(SQLModel, table=True):
    """Scenario database model, one level below a journey."""

    __tablename__ = cast("declared_attr[str]", "scenarios")

    id: str = Field(
        default_factory=new_id,
        sa_column=Column(String(36), primary_key=True, nullable=False),
        description="Scenario ID",
    )
    journey_id: str = Field(
        sa_column=Column(
            "journey_id",
            ForeignKey("journeys.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Parent journey ID (foreign key to journeys.id)",
    )
    title: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Scenario title",
    )
    description: str = Field(
        default="",
        sa_column=Column(String(2000), nullable=False, server_default=""),
        description="Scenario description",
    )
    display_order: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, server_default="0"),
        description="Position within the journey",
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )
    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Last update timestamp",
    )
