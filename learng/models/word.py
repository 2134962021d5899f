"""Word database model using SQLModel."""

from datetime import datetime
from typing import cast

from sqlalchemy import DateTime, Integer
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel, String

from learng.utils.helpers import new_id, utc_now


class WordDB(SQLModel, table=True):
    """Word database model, the leaf of the content tree."""

    __tablename__ = cast("declared_attr[str]", "words")

    id: str = Field(
        default_factory=new_id,
        sa_column=Column(String(36), primary_key=True, nullable=False),
        description="Word ID",
    )
    scenario_id: str = Field(
        sa_column=Column(
            "scenario_id",
            ForeignKey("scenarios.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Parent scenario ID (foreign key to scenarios.id)",
    )
    target_text: str = Field(
        sa_column=Column(String(500), nullable=False),
        description="Text in the target language",
    )
    source_text: str = Field(
        default="",
        sa_column=Column(String(500), nullable=False, server_default=""),
        description="Translation in the source language",
    )
    display_order: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, server_default="0"),
        description="Position within the scenario",
    )
    image_url: str | None = Field(
        default=None,
        sa_column=Column(String(1000)),
        description="Illustration URL",
    )
    audio_url: str | None = Field(
        default=None,
        sa_column=Column(String(1000)),
        description="Pronunciation audio URL",
    )
    generation_method: str = Field(
        default="manual",
        sa_column=Column(String(20), nullable=False, server_default="manual"),
        description="How media was produced (manual, ai_image, ai_audio, ai_both)",
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
