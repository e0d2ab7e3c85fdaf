import pytest

from order_check.errors import ParseError
from order_check.records import Order, order_from_json, order_to_dict


def test_order_from_json_reads_known_fields_and_ignores_others() -> None:
    order = order_from_json('{"event_id": "a", "part_number": "b", "timestamp": "c", "extra": 5}')

    assert order == Order(event_id="a", part_number="b", timestamp="c")


def test_order_from_json_missing_and_null_fields_are_absent() -> None:
    order = order_from_json('{"event_id": null, "timestamp": "t"}')

    assert order == Order(event_id=None, part_number=None, timestamp="t")


def test_order_from_json_rejects_malformed_json() -> None:
    with pytest.raises(ParseError, match="invalid JSON"):
        order_from_json('{"event_id": ')


def test_order_from_json_rejects_non_object() -> None:
    with pytest.raises(ParseError, match="expected a JSON object"):
        order_from_json('["event_id"]')


def test_order_from_json_rejects_non_string_field() -> None:
    with pytest.raises(ParseError, match="'part_number' must be a string"):
        order_from_json('{"part_number": 42}')


def test_order_to_dict_keeps_field_order() -> None:
    assert list(order_to_dict(Order(timestamp="t"))) == ["event_id", "part_number", "timestamp"]


def test_order_from_json_oversized_integer_in_unknown_key_is_parse_error() -> None:
    with pytest.raises(ParseError, match="invalid JSON"):
        order_from_json('{"event_id": "a", "extra": ' + "1" * 5000 + "}")
