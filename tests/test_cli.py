"""Tests for the command line decoder."""

from collections.abc import Callable

import pytest

from hearthforge.cli import build_parser, format_deck, format_difference, main
from hearthforge.models.deck import DeckDifference, DeckSkeleton, Format, GameFormat, Sideboard
from hearthforge.services.card_ids import StaticIdTable

EncodeDeck = Callable[..., str]


@pytest.fixture
def deck() -> DeckSkeleton:
    return DeckSkeleton(
        code="AAECAQcAAAA=",
        title="Big Spell Mage",
        format=Format(kind=GameFormat.STANDARD),
        hero_id=7,
        cards=[100, 100, 200],
        sideboards=[Sideboard(owner_id=90_749, card_ids=[500, 500, 501])],
    )


class TestFormatDeck:
    def test_layout(self, deck: DeckSkeleton) -> None:
        lines = format_deck(deck).splitlines()

        assert lines[0] == "Big Spell Mage"
        assert lines[1] == "  STANDARD deck, hero 7."
        assert lines[2] == "  2x 100"
        assert lines[3] == "     200"
        assert lines[4] == "Sideboard of 90749:"
        assert lines[5] == "  2x 500"
        assert lines[6] == "     501"
        assert lines[-1] == "AAECAQcAAAA="

    def test_names_from_table(self, deck: DeckSkeleton, id_table: StaticIdTable) -> None:
        output = format_deck(deck, id_table)

        assert "  2x Acidic Swamp Ooze (100)" in output
        assert "     Fireball (200)" in output

    def test_no_title(self, deck: DeckSkeleton) -> None:
        deck.title = None

        assert format_deck(deck).splitlines()[0] == "  STANDARD deck, hero 7."


class TestFormatDifference:
    def test_marks(self) -> None:
        diff = DeckDifference(
            first_code="CODE1",
            second_code="CODE2",
            shared={1: 2},
            first_only={2: 1},
            second_only={3: 2},
        )

        lines = format_difference(diff).splitlines()

        assert lines == ["  2x 1", "", "CODE1", "+    2", "", "CODE2", "- 2x 3"]


class TestBuildParser:
    def test_defaults(self) -> None:
        args = build_parser().parse_args(["AAECAQcAAAA="])

        assert args.code == "AAECAQcAAAA="
        assert args.comp is None
        assert args.mode is None
        assert args.no_normalize is False

    def test_options(self) -> None:
        args = build_parser().parse_args(["CODE", "-c", "OTHER", "-m", "twist", "--no-normalize"])

        assert args.comp == "OTHER"
        assert args.mode == "twist"
        assert args.no_normalize is True


class TestMain:
    def test_decodes_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["AAECAQcAAAA=", "--no-normalize"])

        assert exit_code == 0
        out = capsys.readouterr().out
        assert "STANDARD deck, hero 7." in out
        assert out.rstrip().endswith("AAECAQcAAAA=")

    def test_mode_override(self, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["AAECAQcAAAA=", "--no-normalize", "--mode", "Tavern Brawl"])

        assert exit_code == 0
        assert "TAVERN BRAWL deck" in capsys.readouterr().out

    def test_compare(self, encode_deck: EncodeDeck, capsys: pytest.CaptureFixture[str]) -> None:
        first = encode_deck(2, 7, singles=[1])
        second = encode_deck(2, 7, singles=[2])

        exit_code = main([first, "--comp", second, "--no-normalize"])

        assert exit_code == 0
        out = capsys.readouterr().out
        assert "+    1" in out
        assert "-    2" in out

    def test_bad_code_exits_nonzero(self, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["AAECAQ==", "--no-normalize"])

        assert exit_code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "ends too early" in captured.err

    def test_uses_shared_table(
        self,
        monkeypatch: pytest.MonkeyPatch,
        id_table: StaticIdTable,
        encode_deck: EncodeDeck,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr("hearthforge.cli.get_id_table", lambda: id_table)

        exit_code = main([encode_deck(2, 7, singles=[100, 69550])])

        assert exit_code == 0
        assert "2x Acidic Swamp Ooze (100)" in capsys.readouterr().out
