"""Journey database model using SQLModel."""

from datetime import datetime
from typing import cast

from sqlalchemy import DateTime, Index
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel, String

from learng.utils.helpers import new_id, utc_now


class JourneyDB(SQLModel, table=True):
    """
    Journey database model.

    The root of the content tree. ``created_by`` is the only ownership
    record; scenarios and words inherit their owner through it.
    """

    __tablename__ = cast("declared_attr[str]", "journeys")

    __table_args__ = (Index("ix_journeys_status_created", "status", "created_at"),)

    id: str = Field(
        default_factory=new_id,
        sa_column=Column(String(36), primary_key=True, nullable=False),
        description="Journey ID",
    )
    title: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Journey title",
    )
    description: str = Field(
        default="",
        sa_column=Column(String(2000), nullable=False, server_default=""),
        description="Journey description",
    )
    source_language: str = Field(
        sa_column=Column(String(10), nullable=False),
        description="Language the learner already speaks (ISO 639-1)",
    )
    target_language: str = Field(
        sa_column=Column(String(10), nullable=False),
        description="Language being taught (ISO 639-1)",
    )
    status: str = Field(
        default="draft",
        sa_column=Column(String(20), nullable=False, server_default="draft", index=True),
        description="Journey status (draft, published, archived)",
    )
    created_by: str = Field(
        sa_column=Column(
            "created_by",
            ForeignKey("users.id"),
            nullable=False,
            index=True,
        ),
        description="Creator ID (foreign key to users.id)",
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        description="Creation timestamp",
    )
    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Last update timestamp",
    )
