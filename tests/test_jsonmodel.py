import dataclasses
import enum
import json
from dataclasses import dataclass

import pytest

from riotkit.jsonmodel import decode, encode, json_field


class Color(enum.Enum):
    RED = "red"
    BLUE = "blue"


@dataclass
class Inner:
    x: int = json_field("xVal", default=0)


@dataclass
class Outer:
    name: str = json_field("name", default="")
    inners: list[Inner] = json_field("inners", default_factory=list)
    lookup: dict[str, Inner] = json_field("lookup", default_factory=dict)
    maybe: Inner | None = json_field("maybe", default=None)
    color: Color | None = json_field("color", default=None)
    ratio: float = json_field("ratio", default=0.0)
    flag: bool = json_field("flag", default=False)
    tags: list[str] = json_field("tags", default_factory=list, omitempty=True)


def test_round_trip_through_json_text():
    data = {
        "name": "alpha",
        "inners": [{"xVal": 1}, {"xVal": 2}],
        "lookup": {"k": {"xVal": 3}},
        "maybe": {"xVal": 4},
        "color": "blue",
        "ratio": 0.5,
        "flag": True,
        "tags": ["a", "b"],
    }
    decoded = decode(Outer, json.loads(json.dumps(data)))
    assert decoded.inners == [Inner(1), Inner(2)]
    assert decoded.lookup == {"k": Inner(3)}
    assert decoded.maybe == Inner(4)
    assert decoded.color is Color.BLUE
    assert encode(decoded) == data


def test_missing_keys_take_defaults():
    assert decode(Outer, {}) == Outer()


def test_unknown_keys_are_ignored():
    assert decode(Outer, {"unexpected": 1, "name": "n"}) == Outer(name="n")


def test_null_values_take_zero_values():
    decoded = decode(Outer, {"name": None, "inners": None, "maybe": None})
    assert decoded == Outer()


def test_top_level_list_and_null():
    assert decode(list[Inner], [{"xVal": 7}]) == [Inner(7)]
    assert decode(list[Inner], None) == []


def test_omitempty_drops_empty_values_only():
    assert "tags" not in encode(Outer())
    assert encode(Outer(tags=["t"]))["tags"] == ["t"]


def test_fields_without_omitempty_keep_zero_values():
    encoded = encode(Outer())
    assert encoded["name"] == ""
    assert encoded["maybe"] is None
    assert encoded["flag"] is False


def test_float_accepts_integer_json_numbers():
    assert decode(Outer, {"ratio": 2}).ratio == 2.0


@pytest.mark.parametrize(
    "data",
    [
        {"name": 5},
        {"inners": {"xVal": 1}},
        {"inners": [{"xVal": "1"}]},
        {"inners": [{"xVal": True}]},
        {"inners": [{"xVal": 1.5}]},
        {"flag": 1},
        {"maybe": []},
        {"lookup": []},
    ],
)
def test_type_mismatch_raises(data):
    with pytest.raises(TypeError):
        decode(Outer, data)


def test_number_into_list_raises():
    with pytest.raises(TypeError):
        decode(list[Inner], 0)


def test_unknown_enum_value_raises():
    with pytest.raises(ValueError):
        decode(Outer, {"color": "green"})


def test_json_field_rejects_both_defaults():
    with pytest.raises(ValueError):
        json_field("x", default=0, default_factory=int)


def test_json_field_records_key_in_metadata():
    field = next(f for f in dataclasses.fields(Inner) if f.name == "x")
    assert field.metadata["json"] == "xVal"
    assert encode(Inner(9)) == {"xVal": 9}