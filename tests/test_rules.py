import pytest

from order_check.errors import RuleError
from order_check.records import Order
from order_check.rules import Rule, compile_rule


def test_upper_is_ascii_only() -> None:
    xform = compile_rule(Rule(name="u", op="upper", field="part_number"))

    assert xform(Order(part_number="zx-9ß")).part_number == "ZX-9ß"


def test_rule_only_touches_its_field() -> None:
    xform = compile_rule(Rule(name="s", op="strip", field="timestamp"))

    out = xform(Order(event_id=" a ", timestamp=" t "))

    assert out == Order(event_id=" a ", timestamp="t")


def test_absent_field_passes_through() -> None:
    xform = compile_rule(Rule(name="b", op="blank_to_none", field="event_id"))
    order = Order(part_number="p")

    assert xform(order) is order


def test_unknown_op_raises() -> None:
    with pytest.raises(RuleError, match="unknown op"):
        compile_rule(Rule(name="x", op="reverse", field="event_id"))


def test_unknown_field_raises() -> None:
    with pytest.raises(RuleError, match="unknown field"):
        compile_rule(Rule(name="x", op="strip", field="customer"))
