"""Journey request and response schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from learng.schemas.scenario import ScenarioWithWords


class JourneyCreate(BaseModel):
    """Journey creation body. The creator always comes from the token."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(default="", examples=["Mandarin for travellers"])
    description: str = ""
    source_language: str = Field(default="", alias="sourceLanguage", examples=["en"])
    target_language: str = Field(default="", alias="targetLanguage", examples=["zh"])


class JourneyResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: str
    title: str
    description: str
    source_language: str = Field(alias="sourceLanguage")
    target_language: str = Field(alias="targetLanguage")
    status: str
    created_by: str = Field(alias="createdBy")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class JourneyDetail(JourneyResponse):
    """Journey with its scenario tree and aggregate counts."""

    scenarios: list[ScenarioWithWords] = []
    scenario_count: int = Field(default=0, alias="scenarioCount")
    word_count: int = Field(default=0, alias="wordCount")


class JourneyListResponse(BaseModel):
    journeys: list[JourneyResponse]
    total: int
    page: int
    limit: int
