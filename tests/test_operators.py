import pytest

from repokit.operators import FilterOperator, LogicalOperator


@pytest.mark.parametrize(
    "member, text",
    [
        (FilterOperator.EQUAL, "eq"),
        (FilterOperator.NOT_EQUAL, "neq"),
        (FilterOperator.GREATER_THAN, "gt"),
        (FilterOperator.GREATER_EQUAL, "gte"),
        (FilterOperator.LESS_THAN, "lt"),
        (FilterOperator.LESS_EQUAL, "lte"),
        (FilterOperator.LIKE, "like"),
        (FilterOperator.IN, "in"),
        (FilterOperator.NOT_IN, "not_in"),
        (FilterOperator.IS_NULL, "is_null"),
        (FilterOperator.IS_NOT_NULL, "is_not_null"),
        (FilterOperator.BETWEEN, "between"),
        (FilterOperator.CONTAINS, "contains"),
        (FilterOperator.HAS, "has"),
    ],
)
def test_filter_operator_parses_from_text(member, text):
    assert FilterOperator(text) is member
    assert str(member) == text
    assert member == text


def test_filter_operator_round_trip_all_members():
    for member in FilterOperator:
        assert FilterOperator(member.value) is member
        assert FilterOperator(str(member)) is member


def test_filter_operator_values_are_unique():
    texts = [
        "eq", "neq", "gt", "gte", "lt", "lte", "like",
        "in", "not_in", "is_null", "is_not_null", "between", "contains", "has",
    ]
    parsed = {FilterOperator(text) for text in texts}
    assert len(parsed) == len(texts)
    assert parsed == set(FilterOperator)


def test_filter_operator_unknown_raises():
    with pytest.raises(ValueError):
        FilterOperator("approximately")


@pytest.mark.parametrize(
    "member, text", [(LogicalOperator.AND, "and"), (LogicalOperator.OR, "or")]
)
def test_logical_operator_parses_from_text(member, text):
    assert LogicalOperator(text) is member
    assert str(member) == text


def test_logical_operator_unknown_raises():
    with pytest.raises(ValueError):
        LogicalOperator("xor")


def test_logical_operators_are_distinct():
    parsed_and = LogicalOperator("and")
    parsed_or = LogicalOperator("or")
    assert parsed_and is not parsed_or
    assert {parsed_and, parsed_or} == set(LogicalOperator)