"""Rule data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Hashable, Iterable, Iterator

from codemaker.errors import DuplicateRuleError, MissingRuleError, type_label


@dataclass(frozen=True)
class RuleKey:
    input_type: Hashable
    output_type: Hashable

    def describe(self) -> str:
        return f"{type_label(self.input_type)} -> {type_label(self.output_type)}"


@dataclass(frozen=True)
class Rule:
    key: RuleKey
    func: Callable[[Any, Any], Any]
    owner: str

    @property
    def name(self) -> str:
        return self.func.__name__

    def invoke(self, role: Any, value: Any) -> Any:
        return self.func(role, value)


class RuleTable:
    """The rules of one role, at most one per (input type, output type)."""

    def __init__(self, role: str) -> None:
        self.role = role
        self._rules: dict[RuleKey, Rule] = {}

    def add(self, rule: Rule) -> None:
        existing = self._rules.get(rule.key)
        if existing is not None and existing.func is not rule.func:
            raise DuplicateRuleError(
                self.role, rule.key.input_type, rule.key.output_type
            )
        self._rules[rule.key] = rule

    def get(self, key: RuleKey) -> Rule | None:
        return self._rules.get(key)

    def resolve(self, input_type: Hashable, output_type: Hashable) -> Rule:
        rule = self._rules.get(RuleKey(input_type, output_type))
        if rule is None:
            raise MissingRuleError(self.role, input_type, output_type)
        return rule

    def require(self, pairs: Iterable[tuple[Hashable, Hashable]]) -> None:
        for input_type, output_type in pairs:
            self.resolve(input_type, output_type)

    def keys(self) -> list[RuleKey]:
        return list(self._rules)

    def __contains__(self, key: object) -> bool:
        return key in self._rules

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules.values())

    def __len__(self) -> int:
        return len(self._rules)
