"""Tests for waypoint.routing.builder — navigable path building."""

import pytest

from waypoint.errors import ArgumentError, MissingArgument, UnexpectedArgument
from waypoint.routing.builder import build_path
from waypoint.routing.destination import Destination
from waypoint.routing.params import TITLE_KEY

SECOND = Destination("SecondDestination", positional_params=("param1", "param2"))
THIRD = Destination("ThirdDestination", dynamic_title=True)
FOURTH = Destination("FourthDestination", query_params=("query1", "query2", "query3"))
FIFTH = Destination(
    "FifthDestination",
    positional_params=("param1", "param2"),
    query_params=("query1", "query2", "query3"),
)


class TestPositional:
    def test_scenario(self) -> None:
        assert build_path(SECOND, ["Ciao", "2"]) == "SecondDestination/Ciao/2"

    def test_non_string_values(self) -> None:
        assert build_path(SECOND, ("Ciao", 2)) == "SecondDestination/Ciao/2"

    def test_values_encoded(self) -> None:
        assert build_path(SECOND, ("a/b", "c d")) == "SecondDestination/a%2Fb/c%20d"

    def test_no_params(self) -> None:
        assert build_path(Destination("FirstDestination")) == "FirstDestination"

    def test_missing_slot(self) -> None:
        with pytest.raises(MissingArgument) as exc_info:
            build_path(SECOND, ("Ciao",))
        assert exc_info.value.key == "param2"
        assert exc_info.value.destination == "SecondDestination"
        assert "param2" in str(exc_info.value)

    def test_none_slot(self) -> None:
        with pytest.raises(MissingArgument) as exc_info:
            build_path(SECOND, (None, "2"))
        assert exc_info.value.key == "param1"

    def test_empty_slot(self) -> None:
        with pytest.raises(MissingArgument):
            build_path(SECOND, ("Ciao", ""))

    def test_too_many(self) -> None:
        with pytest.raises(UnexpectedArgument, match="expected 2 positional values, got 3"):
            build_path(SECOND, ("a", "b", "c"))

    def test_matched_by_position_not_name(self) -> None:
        assert build_path(SECOND, ("2", "Ciao")) == "SecondDestination/2/Ciao"


class TestDynamicTitle:
    def test_title_encoded(self) -> None:
        assert build_path(THIRD, title="Third destination") == "ThirdDestination/Third%20destination"

    def test_title_before_positional(self) -> None:
        dest = Destination("Detail", positional_params=("id",), dynamic_title=True)
        assert build_path(dest, ("7",), title="Item") == "Detail/Item/7"

    def test_missing_title(self) -> None:
        with pytest.raises(MissingArgument) as exc_info:
            build_path(THIRD)
        assert exc_info.value.key == TITLE_KEY

    def test_empty_title(self) -> None:
        with pytest.raises(MissingArgument):
            build_path(THIRD, title="")

    def test_title_without_dynamic_title(self) -> None:
        with pytest.raises(UnexpectedArgument, match="no dynamic title"):
            build_path(SECOND, ("a", "b"), title="Nope")


class TestQuery:
    def test_scenario(self) -> None:
        path = build_path(FOURTH, query={"query1": None, "query2": "b", "query3": None})
        assert path == "FourthDestination?query2=b"

    def test_all_absent_has_no_question_mark(self) -> None:
        assert build_path(FOURTH) == "FourthDestination"
        assert build_path(FOURTH, query={"query1": None}) == "FourthDestination"

    def test_empty_value_omitted(self) -> None:
        assert build_path(FOURTH, query={"query1": "", "query3": "c"}) == "FourthDestination?query3=c"

    def test_declaration_order(self) -> None:
        path = build_path(FOURTH, query={"query3": "c", "query1": "a"})
        assert path == "FourthDestination?query1=a&query3=c"

    def test_values_encoded(self) -> None:
        path = build_path(FOURTH, query={"query1": "https://www.google.it/?q=a&b=c"})
        assert path == "FourthDestination?query1=https%3A%2F%2Fwww.google.it%2F%3Fq%3Da%26b%3Dc"

    def test_undeclared_key(self) -> None:
        with pytest.raises(UnexpectedArgument) as exc_info:
            build_path(FOURTH, query={"query4": "x"})
        assert exc_info.value.key == "query4"

    def test_positional_and_query(self) -> None:
        path = build_path(FIFTH, ("a", "b"), {"query2": "q"})
        assert path == "FifthDestination/a/b?query2=q"

    def test_missing_positional_still_raises_with_query(self) -> None:
        with pytest.raises(MissingArgument):
            build_path(FIFTH, ("a",), {"query1": "q"})


def test_argument_errors_share_base() -> None:
    assert issubclass(MissingArgument, ArgumentError)
    assert issubclass(UnexpectedArgument, ArgumentError)
