"""Tests for domain models and the failure envelope."""

import pytest

from hearthforge.models.card import CardMetadata, Rarity
from hearthforge.models.deck import DeckDifference, DeckSkeleton, Format, GameFormat
from hearthforge.models.failure import (
    ApiResponse,
    DeckCodeError,
    FailureKind,
    KnownError,
    MalformedBase64Error,
    OutcomeType,
    TruncatedInputError,
    UnsupportedFormatError,
    VarintOverflowError,
)


class TestFormat:
    @pytest.mark.parametrize(
        "text,kind",
        [
            ("standard", GameFormat.STANDARD),
            ("Wild", GameFormat.WILD),
            ("  CLASSIC ", GameFormat.CLASSIC),
            ("twist", GameFormat.TWIST),
        ],
    )
    def test_known_override(self, text: str, kind: GameFormat) -> None:
        assert Format.from_override(text) == Format(kind=kind)

    def test_custom_override_keeps_name(self) -> None:
        fmt = Format.from_override("  Tavern Brawl ")

        assert fmt.kind == GameFormat.CUSTOM
        assert fmt.label == "Tavern Brawl"
        assert str(fmt) == "Tavern Brawl"

    def test_known_label(self) -> None:
        assert Format(kind=GameFormat.WILD).label == "wild"

    def test_is_hashable(self) -> None:
        assert len({Format(kind=GameFormat.WILD), Format(kind=GameFormat.WILD)}) == 1


class TestRarity:
    def test_from_hearth_sim(self) -> None:
        assert Rarity.from_hearth_sim("LEGENDARY") == Rarity.LEGENDARY
        assert Rarity.from_hearth_sim("free") == Rarity.FREE

    def test_unknown_is_noncollectible(self) -> None:
        assert Rarity.from_hearth_sim("") == Rarity.NONCOLLECTIBLE


class TestCardMetadata:
    def test_frozen(self) -> None:
        metadata = CardMetadata(id=1)

        with pytest.raises(AttributeError):
            metadata.id = 2  # type: ignore[misc]


class TestDeckSkeleton:
    def test_counts(self) -> None:
        deck = DeckSkeleton(
            code="x",
            format=Format(kind=GameFormat.STANDARD),
            hero_id=7,
            cards=[1, 1, 2],
        )

        assert deck.card_count == 3
        assert deck.card_counts() == {1: 2, 2: 1}


class TestDeckDifference:
    def test_identical_when_no_extras(self) -> None:
        assert DeckDifference("a", "b", shared={1: 2}).is_identical

    def test_not_identical(self) -> None:
        assert not DeckDifference("a", "b", second_only={1: 1}).is_identical


class TestKnownError:
    def test_to_response(self) -> None:
        error = KnownError(
            kind=FailureKind.TRUNCATED_INPUT,
            message="Bad input",
            detail="field x",
            suggestion="Fix x",
        )

        response = error.to_response()

        assert response.outcome == OutcomeType.KNOWN_FAILURE
        assert response.data is None
        assert response.failure is not None
        assert response.failure.kind == FailureKind.TRUNCATED_INPUT
        assert response.failure.message == "Bad input"
        assert response.failure.suggestion == "Fix x"

    def test_default_status_code(self) -> None:
        assert KnownError(FailureKind.TRUNCATED_INPUT, "x").status_code == 400


class TestDeckCodeErrors:
    @pytest.mark.parametrize(
        "error,kind",
        [
            (MalformedBase64Error("abc", "bad padding"), FailureKind.MALFORMED_BASE64),
            (TruncatedInputError(5, 5), FailureKind.TRUNCATED_INPUT),
            (VarintOverflowError(6, 8), FailureKind.VARINT_OVERFLOW),
            (UnsupportedFormatError(9), FailureKind.UNSUPPORTED_FORMAT),
        ],
    )
    def test_classified(self, error: DeckCodeError, kind: FailureKind) -> None:
        assert isinstance(error, KnownError)
        assert error.kind == kind
        assert error.suggestion

    def test_truncated_detail(self) -> None:
        error = TruncatedInputError(offset=7, length=7)

        assert error.detail == "Read at offset 7 past end of 7-byte buffer"


class TestApiResponse:
    def test_success(self) -> None:
        response = ApiResponse[int].success(5)

        assert response.outcome == OutcomeType.SUCCESS
        assert response.data == 5
        assert response.failure is None

    def test_unknown_failure(self) -> None:
        response = ApiResponse.unknown_failure("trace")

        assert response.outcome == OutcomeType.UNKNOWN_FAILURE
        assert response.failure is not None
        assert response.failure.kind == FailureKind.UNKNOWN
        assert response.failure.detail == "trace"
