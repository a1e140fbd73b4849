import pytest

from parsing import ranking_parser
from domain.models import LanguageRanking
from utils import html_utils
from tests.factories import SAMPLE_PAGE, make_page, make_row, ranking_row


def test_parses_rows_in_source_order():
    rankings = ranking_parser.parse_rankings(SAMPLE_PAGE)
    assert [r.name for r in rankings] == ["Python", "C", "C++", "Java"]
    assert rankings[0] == LanguageRanking(1, 1, "Python", "24.45%", "+2.55%")
    assert rankings[2].prev_rank == 2


def test_does_not_resort_rows():
    html = make_page(
        [
            ranking_row("3", "2", "C++", "8.84%"),
            ranking_row("1", "1", "Python", "24.45%"),
            ranking_row("2", "4", "C", "9.29%"),
        ]
    )
    assert [r.rank for r in ranking_parser.parse_rankings(html)] == [3, 1, 2]


def test_missing_change_column_uses_placeholder():
    html = make_page([ranking_row("1", "1", "Python", "24.45%")])
    (python,) = ranking_parser.parse_rankings(html)
    assert python.change == "N/A"


def test_short_rows_are_skipped():
    html = make_page(
        [
            make_row("1", "1", "", "Python"),
            make_row("only one cell"),
            ranking_row("2", "4", "C", "9.29%", "+0.91%"),
        ]
    )
    rankings = ranking_parser.parse_rankings(html)
    assert [r.name for r in rankings] == ["C"]


def test_non_numeric_previous_rank_defaults_to_zero():
    html = make_page([ranking_row("7", "new", "Zig", "0.50%", "+0.30%")])
    (zig,) = ranking_parser.parse_rankings(html)
    assert zig.rank == 7
    assert zig.prev_rank == 0


def test_rows_without_rank_or_name_are_dropped():
    html = make_page(
        [
            ranking_row("abc", "1", "Python", "24.45%"),
            ranking_row("0", "1", "C", "9.29%"),
            ranking_row("3", "2", "   ", "8.84%"),
            ranking_row("4", "3", "Java", "8.35%"),
        ]
    )
    assert [r.name for r in ranking_parser.parse_rankings(html)] == ["Java"]


def test_cell_whitespace_is_trimmed():
    html = make_page([make_row(" 1 ", "\n2\n", "", "  Visual   Basic ", " 2.81% ", " +0.85% ")])
    (vb,) = ranking_parser.parse_rankings(html)
    assert vb == LanguageRanking(1, 2, "Visual Basic", "2.81%", "+0.85%")


def test_other_tables_are_ignored():
    html = make_page([ranking_row("1", "1", "Python", "24.45%")], table_id="otherPL")
    assert ranking_parser.parse_rankings(html) == []


def test_garbage_input_returns_empty_list():
    assert ranking_parser.parse_rankings("") == []
    assert ranking_parser.parse_rankings("<html><body><p>maintenance</p></body></html>") == []


def test_inline_markup_is_concatenated_without_spaces():
    html = make_page(
        [
            make_row(
                "<b>1</b>",
                "1",
                "",
                "<a href='/py'>Py</a>thon",
                "23.64<span>%</span>",
                "-0.21<span>%</span>",
            )
        ]
    )
    (python,) = ranking_parser.parse_rankings(html)
    assert python == LanguageRanking(1, 1, "Python", "23.64%", "-0.21%")


def test_table_without_tbody():
    html = (
        '<html><body><table id="top20">'
        + ranking_row("1", "1", "Python", "24.45%", "+2.55%")
        + ranking_row("2", "4", "C", "9.29%")
        + "</table></body></html>"
    )
    assert [r.name for r in ranking_parser.parse_rankings(html)] == ["Python", "C"]


def test_header_rows_outside_tbody_are_not_parsed():
    rankings = ranking_parser.parse_rankings(SAMPLE_PAGE)
    assert all(r.name != "Programming Language" for r in rankings)


@pytest.mark.parametrize("text", ["1_000", "٣", "1.5", "", "  "])
def test_rank_accepts_only_plain_ascii_integers(text):
    html = make_page([ranking_row("5", text, "Go", "1.37%")])
    (go,) = ranking_parser.parse_rankings(html)
    assert go.prev_rank == 0


def test_signed_ranks_parse():
    assert html_utils.parse_int("+3") == 3
    assert html_utils.parse_int(" 12 ") == 12
