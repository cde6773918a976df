"""Tests for role rule tables and dispatch."""

from dataclasses import dataclass

import pytest

from codemaker.errors import DuplicateRuleError, MissingRuleError, RuleResolutionError
from codemaker.rules import Role, RuleKey, rule


class Numbers(list):
    pass


class Joiner(Role):
    @rule(Numbers, str)
    def join(self, values: Numbers) -> str:
        return "".join(self.make_from_iter(values, str, input_type=int))

    @rule(int, str)
    def number(self, value: int) -> str:
        return f"{value},"


@dataclass(frozen=True)
class SeparatedJoiner(Role):
    sep: str

    @rule(int, str)
    def number(self, value: int) -> str:
        return f"{value}{self.sep}"

    @rule(tuple, str)
    def pair(self, value: tuple) -> str:
        return "".join(self.make_from_iter(value, str))


def test_make_from_dispatches_on_input_and_output_type() -> None:
    assert Joiner().make_from(Numbers([1, 2, 3]), str) == "1,2,3,"
    assert Joiner().make_from(7, str) == "7,"


def test_rules_receive_role_configuration() -> None:
    assert SeparatedJoiner(sep="-").make_from((4, 5, 6, 7), str) == "4-5-6-7-"


def test_make_from_iter_yields_one_output_per_input_in_order() -> None:
    role = SeparatedJoiner(sep=";")
    inputs = [3, 1, 2, 10]
    outputs = list(role.make_from_iter(inputs, str))
    assert outputs == [role.make_from(value, str) for value in inputs]
    assert len(outputs) == len(inputs)


def test_make_from_iter_is_lazy() -> None:
    calls: list[int] = []

    class Recording(Role):
        @rule(int, str)
        def record(self, value: int) -> str:
            calls.append(value)
            return str(value)

    results = Recording().make_from_iter([1, 2, 3], str)
    assert calls == []
    assert next(results) == "1"
    assert calls == [1]
    assert list(results) == ["2", "3"]
    assert calls == [1, 2, 3]


def test_make_from_iter_with_input_type_resolves_before_consuming() -> None:
    with pytest.raises(MissingRuleError):
        Joiner().make_from_iter(iter([1.5]), str, input_type=float)


def test_missing_rule_at_call_time() -> None:
    with pytest.raises(MissingRuleError, match="No rule registered"):
        Joiner().make_from("text", str)


def test_output_type_must_match_exactly() -> None:
    with pytest.raises(MissingRuleError):
        Joiner().make_from(1, bytes)


def test_duplicate_rule_in_class_body_is_rejected() -> None:
    with pytest.raises(DuplicateRuleError, match="Duplicate rule"):

        class Clashing(Role):
            @rule(int, str)
            def first(self, value: int) -> str:
                return "first"

            @rule(int, str)
            def second(self, value: int) -> str:
                return "second"


def test_redefined_method_name_is_still_a_duplicate() -> None:
    with pytest.raises(DuplicateRuleError):

        class Redefined(Role):
            @rule(int, str)
            def convert(self, value: int) -> str:
                return "first"

            @rule(int, str)
            def convert(self, value: int) -> str:  # noqa: F811
                return "second"


def test_subclass_cannot_reregister_inherited_pair() -> None:
    with pytest.raises(DuplicateRuleError):

        class Override(Joiner):
            @rule(int, str)
            def number_again(self, value: int) -> str:
                return str(value)


def test_subclass_inherits_rules() -> None:
    class Extended(Joiner):
        @rule(float, str)
        def decimal(self, value: float) -> str:
            return f"{value:.1f},"

    role = Extended()
    assert role.make_from(Numbers([1]), str) == "1,"
    assert role.make_from(2.0, str) == "2.0,"
    assert RuleKey(float, str) not in Joiner.rules()


def test_required_rules_are_checked_when_role_is_assembled() -> None:
    with pytest.raises(MissingRuleError) as excinfo:

        class Incomplete(Role):
            REQUIRED_RULES = ((int, str), (float, str))

            @rule(int, str)
            def number(self, value: int) -> str:
                return str(value)

    assert excinfo.value.input_type is float
    assert isinstance(excinfo.value, RuleResolutionError)


def test_top_level_pair_is_required_and_used_by_make() -> None:
    with pytest.raises(MissingRuleError):

        class NoTopLevel(Role):
            INPUT_TYPE = Numbers
            OUTPUT_TYPE = str

    class TopLevel(Joiner):
        INPUT_TYPE = Numbers
        OUTPUT_TYPE = str

    assert TopLevel().make(Numbers([9])) == "9,"


def test_make_without_top_level_pair_raises() -> None:
    with pytest.raises(TypeError, match="no top-level conversion"):
        Joiner().make(Numbers([1]))


def test_rules_table_introspection() -> None:
    table = Joiner.rules()
    assert len(table) == 2
    assert set(table.keys()) == {RuleKey(Numbers, str), RuleKey(int, str)}
    assert {item.name for item in table} == {"join", "number"}


def test_rule_keys_may_be_non_type_tags() -> None:
    class Tagged(Role):
        @rule("celsius", "fahrenheit")
        def convert(self, value: float) -> float:
            return value * 9 / 5 + 32

    assert Tagged().make_from(100.0, "fahrenheit", input_type="celsius") == 212.0


def test_plain_override_of_rule_method_takes_over_dispatch() -> None:
    class Base(Role):
        @rule(int, str)
        def convert(self, value: int) -> str:
            return "base"

    class Child(Base):
        def convert(self, value: int) -> str:
            return "child"

    assert Child().make_from(1, str) == Child().convert(1) == "child"
    assert Child.rules().get(RuleKey(int, str)).owner.endswith("Child")
    assert Base().make_from(1, str) == "base"


def test_override_can_extend_inherited_rule() -> None:
    class Child(SeparatedJoiner):
        def number(self, value: int) -> str:
            return f"[{super().number(value)}]"

    assert Child(sep="|").make_from((1, 2), str) == "[1|][2|]"


def test_override_declaring_the_same_pair_is_a_duplicate() -> None:
    with pytest.raises(DuplicateRuleError):

        class Child(Joiner):
            @rule(int, str)
            def number(self, value: int) -> str:
                return str(value)
