import json

import pytest

from repokit.criteria import FilterCriteria
from repokit.operators import FilterOperator, LogicalOperator


def test_to_dict_single_value_omits_empty_fields():
    criteria = FilterCriteria(field="age", operator=FilterOperator.GREATER_THAN, value=18)
    assert criteria.to_dict() == {"field": "age", "operator": "gt", "value": 18}


def test_to_dict_empty_criteria_keeps_field_and_operator():
    assert FilterCriteria().to_dict() == {"field": "", "operator": ""}


def test_to_dict_values_and_logical_op():
    criteria = FilterCriteria(
        field="status",
        operator=FilterOperator.IN,
        values=["a", "b"],
        logical_op=LogicalOperator.OR,
    )
    data = criteria.to_dict()
    assert data["values"] == ["a", "b"]
    assert data["logicalOp"] == "or"
    assert "value" not in data


def test_to_dict_empty_values_list_is_omitted():
    criteria = FilterCriteria(field="id", operator=FilterOperator.IN, values=[])
    assert "values" not in criteria.to_dict()


def test_round_trip_simple():
    criteria = FilterCriteria(field="name", operator=FilterOperator.EQUAL, value="test")
    assert FilterCriteria.from_dict(criteria.to_dict()) == criteria


def test_round_trip_nested_group_through_json():
    criteria = FilterCriteria(
        logical_op=LogicalOperator.AND,
        group=[
            FilterCriteria(field="type", operator=FilterOperator.EQUAL, value="A",
                           logical_op=LogicalOperator.OR),
            FilterCriteria(field="age", operator=FilterOperator.BETWEEN, values=[10, 20]),
        ],
    )
    text = json.dumps(criteria.to_dict())
    restored = FilterCriteria.from_dict(json.loads(text))
    assert restored == criteria
    assert restored.group[1].values == [10, 20]


def test_from_dict_missing_keys_gives_defaults():
    restored = FilterCriteria.from_dict({})
    assert restored == FilterCriteria()
    assert restored.operator is None
    assert restored.logical_op is None


def test_from_dict_empty_operator_is_none():
    restored = FilterCriteria.from_dict({"field": "x", "operator": ""})
    assert restored.field == "x"
    assert restored.operator is None


def test_from_dict_unknown_operator_raises():
    with pytest.raises(ValueError):
        FilterCriteria.from_dict({"field": "x", "operator": "approximately"})


def test_from_dict_unknown_logical_operator_raises():
    with pytest.raises(ValueError):
        FilterCriteria.from_dict({"field": "x", "operator": "eq", "logicalOp": "xor"})


def test_from_dict_copies_values_list():
    source = {"field": "id", "operator": "in", "values": [1, 2, 3]}
    restored = FilterCriteria.from_dict(source)
    source["values"].append(4)
    assert restored.values == [1, 2, 3]


def test_to_dict_copies_values_list():
    criteria = FilterCriteria(field="id", operator=FilterOperator.NOT_IN, values=[1, 2])
    data = criteria.to_dict()
    data["values"].append(3)
    assert criteria.values == [1, 2]