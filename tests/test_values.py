import pytest

from unitcalc.expr import ApplyFunctionCall, Ident, UnaryMinus
from unitcalc.values import (
    NOT,
    ApplyMulHandling,
    BoolValue,
    BuiltInFunction,
    FuncValue,
    Keyword,
    ObjectValue,
    UnitValue,
    ValueTypeError,
    not_value,
)

_INVERSES = [
    ("sin", "asin"),
    ("cos", "acos"),
    ("tan", "atan"),
    ("asin", "sin"),
    ("acos", "cos"),
    ("atan", "tan"),
    ("sinh", "asinh"),
    ("cosh", "acosh"),
    ("tanh", "atanh"),
    ("asinh", "sinh"),
    ("acosh", "cosh"),
    ("atanh", "tanh"),
]


@pytest.mark.parametrize("name, inverse", _INVERSES)
def test_invert(name, inverse):
    assert str(BuiltInFunction(name).invert()) == inverse


@pytest.mark.parametrize("name", [name for name, _ in _INVERSES])
def test_double_inversion_round_trips(name):
    func = BuiltInFunction(name)
    assert func.invert().invert() is func


@pytest.mark.parametrize("name", ["abs", "ln", "log10", "base"])
def test_invert_non_invertible(name):
    with pytest.raises(ValueTypeError):
        BuiltInFunction(name).invert()


@pytest.mark.parametrize("name", ["log2", "base", "approximately", "sample"])
def test_builtin_names(name):
    func = BuiltInFunction(name)
    assert str(func) == name


def test_keywords():
    dp = Keyword(str(Keyword.DP))
    sf = Keyword(str(Keyword.SF))
    assert dp is Keyword.DP
    assert sf is Keyword.SF
    assert str(dp) == "dp"
    assert str(sf) == "sf"


def test_apply_mul_handling_distinct():
    both = ApplyMulHandling(ApplyMulHandling.BOTH.value)
    only = ApplyMulHandling(ApplyMulHandling.ONLY_APPLY.value)
    assert both is ApplyMulHandling.BOTH
    assert only is ApplyMulHandling.ONLY_APPLY
    assert both != only


def test_object_member():
    obj = ObjectValue.from_pairs([("mass", 5), ("radius", 7)])
    assert obj.get_member("radius") == 7
    assert obj.get_member("mass") == 5


def test_object_missing_member():
    with pytest.raises(KeyError):
        ObjectValue((("mass", 5),)).get_member("radius")


def test_object_format_layout():
    obj = ObjectValue((("a", 1), ("b", 2)))
    text = obj.format(lambda value, indent: str(value), 0)
    assert text == "{\n    a: 1,\n    b: 2\n}"


def test_object_format_passes_deeper_indent():
    seen = []

    def fmt(value, indent):
        seen.append(indent)
        return str(value)

    text = ObjectValue((("a", 1),)).format(fmt, 4)
    assert seen == [8]
    assert text == "{\n" + " " * 8 + "a: 1\n}"


def test_unit_value():
    unit = UnitValue()
    assert unit.format() == "()"
    assert unit.is_unit
    assert unit.type_name == "()"


def test_bool_value():
    assert BoolValue(True).format() == "true"
    assert BoolValue(False).format() == "false"
    assert BoolValue(True).is_unit is False


def test_not_value():
    assert not_value(BoolValue(True)) == BoolValue(False)
    assert not_value(not_value(BoolValue(True))) == BoolValue(True)


def test_not_rejects_number():
    with pytest.raises(ValueTypeError):
        not_value(1)


def test_not_rejects_unit():
    with pytest.raises(ValueTypeError):
        not_value(UnitValue())


def test_not_func():
    assert NOT.format() == "not"
    assert NOT.apply(BoolValue(False)) == BoolValue(True)


def test_func_value_applies():
    doubler = FuncValue("double", lambda value: value * 2)
    assert doubler.apply(21) == 42
    assert doubler.type_name == "function"


def test_unit_is_not_a_function():
    with pytest.raises(ValueTypeError):
        UnitValue().apply(1)