"""Word request and response schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class WordCreate(BaseModel):
    """Word creation body."""

    model_config = ConfigDict(populate_by_name=True)

    scenario_id: str = Field(default="", alias="scenarioId")
    target_text: str = Field(default="", alias="targetText", examples=["你好"])
    source_text: str = Field(default="", alias="sourceText", examples=["hello"])
    display_order: int = Field(default=0, alias="displayOrder")
    image_url: str | None = Field(default=None, alias="imageUrl")
    audio_url: str | None = Field(default=None, alias="audioUrl")
    generation_method: str = Field(default="", alias="generationMethod")


class WordResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: str
    scenario_id: str = Field(alias="scenarioId")
    target_text: str = Field(alias="targetText")
    source_text: str = Field(alias="sourceText")
    display_order: int = Field(alias="displayOrder")
    image_url: str | None = Field(alias="imageUrl")
    audio_url: str | None = Field(alias="audioUrl")
    generation_method: str = Field(alias="generationMethod")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")
