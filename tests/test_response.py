import json

import pytest

from seealso_client.response import Entry, ResultSet, is_valid_callback, normalize, to_wire


def test_plain_string_is_identifier_only() -> None:
    result = normalize("plainId")
    assert result.identifier == "plainId"
    assert result.size() == 0


def test_json_string_is_parsed() -> None:
    result = normalize('  ["x",["L"],["D"],["U"]]')
    assert result.identifier == "x"
    assert result.entries == [Entry(label="L", description="D", uri="U")]


def test_missing_description_and_uri_lists_default_to_empty() -> None:
    result = normalize(["x", ["L1", "L2"]])
    assert result.labels == ["L1", "L2"]
    assert result.descriptions == ["", ""]
    assert result.uris == ["", ""]


def test_short_lists_are_padded_and_label_list_governs_length() -> None:
    result = normalize(["x", ["a", "b", "c"], ["da"], ["ua", "ub", "uc", "ud"]])
    assert result.size() == 3
    assert result.descriptions == ["da", "", ""]
    assert result.uris == ["ua", "ub", "uc"]


def test_non_composite_labels_yield_no_entries() -> None:
    result = normalize(["x", "not-a-list", ["d"], ["u"]])
    assert result.identifier == "x"
    assert result.size() == 0


def test_wrong_types_degrade_to_defaults() -> None:
    result = normalize([42, ["ok", None, 7], "nope", {"0": "u0"}])
    assert result.identifier == ""
    assert result.labels == ["ok", "", ""]
    assert result.descriptions == ["", "", ""]
    assert result.uris == ["u0", "", ""]


def test_mapping_payload_is_read_by_position() -> None:
    result = normalize({"0": "id", 1: ["L"], "2": ["D"]})
    assert result.identifier == "id"
    assert result.entries == [Entry(label="L", description="D", uri="")]


@pytest.mark.parametrize("value", [None, 12, 1.5, True])
def test_other_types_yield_empty_result(value: object) -> None:
    assert normalize(value) == ResultSet()


def test_invalid_json_string_propagates() -> None:
    with pytest.raises(json.JSONDecodeError):
        normalize('["x", [')


def test_result_set_is_a_fixed_point() -> None:
    result = ResultSet(identifier="x")
    assert normalize(result) is result


def test_add_and_get() -> None:
    result = ResultSet()
    result.add("label", None, "http://example.org")
    assert result.get(0) == Entry(label="label", description="", uri="http://example.org")
    assert result.get(1) is None
    assert result.get(-1) is None
    assert len(result) == 1


def test_to_wire_plain_and_jsonp() -> None:
    result = normalize(["x", ["L"], ["D"], ["U"]])
    assert to_wire(result) == '["x",["L"],["D"],["U"]]'
    assert result.to_wire("cb.items[0]") == 'cb.items[0](["x",["L"],["D"],["U"]]);'


def test_to_wire_ignores_invalid_callback() -> None:
    result = normalize("x")
    assert to_wire(result, "alert(1)//") == '["x",[],[],[]]'
    assert is_valid_callback("") is False
    assert is_valid_callback(None) is False


def test_wire_round_trip() -> None:
    original = normalize(["ü", ["L1", "L2"], ["D1", "D2"], ["U1", "U2"]])
    assert normalize(to_wire(original)) == original
