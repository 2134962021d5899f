"""Scenario request and response schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from learng.schemas.word import WordResponse


class ScenarioCreate(BaseModel):
    """Scenario creation body."""

    model_config = ConfigDict(populate_by_name=True)

    journey_id: str = Field(default="", alias="journeyId")
    title: str = Field(default="", examples=["At the airport"])
    description: str = ""
    display_order: int = Field(default=0, alias="displayOrder")


class ScenarioResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: str
    journey_id: str = Field(alias="journeyId")
    title: str
    description: str
    display_order: int = Field(alias="displayOrder")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class ScenarioWithWords(ScenarioResponse):
    """Scenario with its words in display order."""

    words: list[WordResponse] = []
