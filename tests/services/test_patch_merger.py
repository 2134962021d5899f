"""Tests for table-driven partial updates."""

from datetime import UTC, datetime

import pytest

from learng.errors import InvalidRequestBodyError, PatchValidationError
from learng.models import JourneyDB, ScenarioDB, WordDB
from learng.services import (
    FieldKind,
    FieldRule,
    journey_merger,
    normalize_page,
    scenario_merger,
    word_merger,
)

EPOCH = datetime(2025, 1, 1, tzinfo=UTC)


@pytest.fixture
def journey() -> JourneyDB:
    return JourneyDB(
        id="j1",
        title="Trip",
        description="",
        source_language="en",
        target_language="zh",
        status="draft",
        created_by="u1",
        created_at=EPOCH,
        updated_at=EPOCH,
    )


@pytest.fixture
def word() -> WordDB:
    return WordDB(
        id="w1",
        scenario_id="s1",
        target_text="你好",
        source_text="hello",
        display_order=0,
        image_url="https://img.example/1.png",
        generation_method="manual",
        created_at=EPOCH,
        updated_at=EPOCH,
    )


class TestJourneyMerger:
    """Test cases for journey patches."""

    def test_valid_patch_is_applied(self, journey: JourneyDB) -> None:
        journey_merger.merge(journey, {"status": "published", "title": "Trip 2"})

        assert journey.status == "published"
        assert journey.title == "Trip 2"
        assert journey.updated_at > EPOCH

    def test_unknown_status_leaves_entity_unchanged(self, journey: JourneyDB) -> None:
        with pytest.raises(PatchValidationError) as exc_info:
            journey_merger.merge(journey, {"title": "New", "status": "bogus"})

        assert exc_info.value.detail == "invalid status"
        assert journey.title == "Trip"
        assert journey.status == "draft"
        assert journey.updated_at == EPOCH

    def test_protected_fields_are_ignored(self, journey: JourneyDB) -> None:
        journey_merger.merge(
            journey,
            {"id": "other", "createdBy": "intruder", "created_by": "intruder", "title": "X"},
        )

        assert journey.id == "j1"
        assert journey.created_by == "u1"
        assert journey.title == "X"

    def test_empty_patch_changes_nothing(self, journey: JourneyDB) -> None:
        journey_merger.merge(journey, {})

        assert journey.updated_at == EPOCH

    @pytest.mark.parametrize("value", [None, 3, ""])
    def test_title_must_be_non_empty_text(self, journey: JourneyDB, value: object) -> None:
        with pytest.raises(PatchValidationError):
            journey_merger.merge(journey, {"title": value})

        assert journey.title == "Trip"

    def test_wire_names_map_to_columns(self, journey: JourneyDB) -> None:
        journey_merger.merge(journey, {"sourceLanguage": "fr", "targetLanguage": "de"})

        assert (journey.source_language, journey.target_language) == ("fr", "de")

    @pytest.mark.parametrize("patch", [["status"], "published", 7, None])
    def test_non_object_patch_is_rejected(self, journey: JourneyDB, patch: object) -> None:
        with pytest.raises(InvalidRequestBodyError):
            journey_merger.merge(journey, patch)


class TestScenarioMerger:
    """Test cases for scenario patches."""

    @pytest.fixture
    def scenario(self) -> ScenarioDB:
        return ScenarioDB(
            id="s1",
            journey_id="j1",
            title="Airport",
            description="",
            display_order=1,
            created_at=EPOCH,
            updated_at=EPOCH,
        )

    def test_integral_float_order_becomes_int(self, scenario: ScenarioDB) -> None:
        scenario_merger.merge(scenario, {"displayOrder": 4.0})

        assert scenario.display_order == 4
        assert isinstance(scenario.display_order, int)

    @pytest.mark.parametrize("value", [True, 1.5, "2", None])
    def test_non_integer_order_is_rejected(self, scenario: ScenarioDB, value: object) -> None:
        with pytest.raises(PatchValidationError) as exc_info:
            scenario_merger.merge(scenario, {"displayOrder": value})

        assert exc_info.value.detail == "displayOrder must be an integer"
        assert scenario.display_order == 1

    def test_journey_cannot_be_moved(self, scenario: ScenarioDB) -> None:
        scenario_merger.merge(scenario, {"journeyId": "j2"})

        assert scenario.journey_id == "j1"


class TestWordMerger:
    """Test cases for word patches."""

    def test_null_clears_optional_media(self, word: WordDB) -> None:
        word_merger.merge(word, {"imageUrl": None, "audioUrl": "https://a.example/1.mp3"})

        assert word.image_url is None
        assert word.audio_url == "https://a.example/1.mp3"

    def test_unknown_generation_method_is_rejected(self, word: WordDB) -> None:
        with pytest.raises(PatchValidationError) as exc_info:
            word_merger.merge(word, {"sourceText": "hi", "generationMethod": "magic"})

        assert exc_info.value.detail == "invalid generation method"
        assert word.source_text == "hello"

    def test_known_generation_method_is_applied(self, word: WordDB) -> None:
        word_merger.merge(word, {"generationMethod": "ai_both"})

        assert word.generation_method == "ai_both"

    def test_source_text_must_be_a_string(self, word: WordDB) -> None:
        with pytest.raises(PatchValidationError) as exc_info:
            word_merger.merge(word, {"sourceText": None})

        assert exc_info.value.detail == "sourceText must be a string"


class TestFieldRule:
    """Test cases for single-field coercion."""

    def test_choice_outside_domain(self) -> None:
        rule = FieldRule("status", FieldKind.CHOICE, "status", frozenset({"a", "b"}))

        assert rule.coerce("a") == "a"
        with pytest.raises(PatchValidationError):
            rule.coerce("c")

    def test_optional_text_rejects_numbers(self) -> None:
        rule = FieldRule("image_url", FieldKind.OPTIONAL_TEXT, "imageUrl")

        with pytest.raises(PatchValidationError, match="string or null"):
            rule.coerce(1)


class TestNormalizePage:
    """Pagination input is clamped rather than rejected."""

    @pytest.mark.parametrize(
        ("page", "limit", "expected"),
        [
            (None, None, (1, 20)),
            (0, 10, (1, 10)),
            (-3, 100, (1, 100)),
            (2, 0, (2, 20)),
            (2, 101, (2, 20)),
            (5, 1, (5, 1)),
        ],
    )
    def test_normalize(
        self,
        page: int | None,
        limit: int | None,
        expected: tuple[int, int],
    ) -> None:
        assert normalize_page(page, limit) == expected
