"""Roles and the rule decorator.

A role is a class whose methods, marked with :func:`rule`, convert values
of one type into values of another. The metaclass assembles each role's
:class:`RuleTable` when the class is created, so duplicate or missing rules
fail at import time rather than in the middle of a generation run.
"""

from __future__ import annotations

import logging
from abc import ABCMeta
from typing import Any, Callable, ClassVar, Hashable, Iterable, Iterator, TypeVar

from codemaker.errors import DuplicateRuleError
from codemaker.rules.models import Rule, RuleKey, RuleTable

logger = logging.getLogger(__name__)

_RULE_ATTR = "__codemaker_rules__"

F = TypeVar("F", bound=Callable[..., Any])


def rule(input_type: Hashable, output_type: Hashable) -> Callable[[F], F]:
    """Mark a role method as the rule converting ``input_type`` to ``output_type``."""

    def decorate(func: F) -> F:
        keys = list(getattr(func, _RULE_ATTR, ()))
        keys.append(RuleKey(input_type, output_type))
        setattr(func, _RULE_ATTR, tuple(keys))
        return func

    return decorate


def _rule_keys(value: Any) -> tuple[RuleKey, ...]:
    return getattr(value, _RULE_ATTR, ())


class _RuleNamespace(dict):
    """Class body namespace that remembers every rule assigned in it.

    Redefining a method name would otherwise silently drop the earlier
    rule before the metaclass ever sees it.
    """

    def __init__(self) -> None:
        super().__init__()
        self.declared: list[tuple[RuleKey, Callable[..., Any]]] = []

    def __setitem__(self, key: str, value: Any) -> None:
        for rule_key in _rule_keys(value):
            self.declared.append((rule_key, value))
        super().__setitem__(key, value)


def _rebind_override(item: Rule, namespace: dict[str, Any], owner: str) -> Rule:
    """Point an inherited rule at a same-named override that declares no rules."""
    override = namespace.get(item.name)
    if override is None or not callable(override) or _rule_keys(override):
        return item
    return Rule(key=item.key, func=override, owner=owner)


class RoleMeta(ABCMeta):
    @classmethod
    def __prepare__(mcls, name: str, bases: tuple[type, ...], **kwargs: Any):
        return _RuleNamespace()

    def __new__(
        mcls,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        **kwargs: Any,
    ):
        declared = getattr(namespace, "declared", [])
        cls = super().__new__(mcls, name, bases, dict(namespace), **kwargs)

        table = RuleTable(role=cls.__qualname__)
        for base in bases:
            inherited: RuleTable | None = getattr(base, "_rule_table", None)
            if inherited is None:
                continue
            for item in inherited:
                table.add(_rebind_override(item, namespace, cls.__qualname__))

        inherited_keys = set(table.keys())
        for key, func in declared:
            if key in inherited_keys:
                raise DuplicateRuleError(table.role, key.input_type, key.output_type)
            table.add(Rule(key=key, func=func, owner=cls.__qualname__))

        cls._rule_table = table
        table.require(cls.required_rules())
        if len(table):
            logger.debug(
                "Assembled %d rule(s) for %s: %s",
                len(table),
                table.role,
                ", ".join(key.describe() for key in table.keys()),
            )
        return cls


class Role(metaclass=RoleMeta):
    """A named context under which rules are registered and invoked.

    Subclasses carry their configuration as (ideally frozen) attributes and
    declare rules with :func:`rule`. ``INPUT_TYPE``/``OUTPUT_TYPE`` name the
    top-level conversion performed by :meth:`make`; ``REQUIRED_RULES``
    lists further pairs that must be present once the class is assembled.
    """

    INPUT_TYPE: ClassVar[Hashable | None] = None
    OUTPUT_TYPE: ClassVar[Hashable | None] = None
    REQUIRED_RULES: ClassVar[tuple[tuple[Hashable, Hashable], ...]] = ()

    _rule_table: ClassVar[RuleTable]

    @classmethod
    def required_rules(cls) -> list[tuple[Hashable, Hashable]]:
        required = list(cls.REQUIRED_RULES)
        if cls.INPUT_TYPE is not None and cls.OUTPUT_TYPE is not None:
            required.append((cls.INPUT_TYPE, cls.OUTPUT_TYPE))
        return required

    @classmethod
    def rules(cls) -> RuleTable:
        return cls._rule_table

    def make(self, value: Any) -> Any:
        if self.INPUT_TYPE is None or self.OUTPUT_TYPE is None:
            raise TypeError(f"{type(self).__qualname__} declares no top-level conversion")
        return self.make_from(value, self.OUTPUT_TYPE, input_type=self.INPUT_TYPE)

    def make_from(
        self,
        value: Any,
        output_type: Hashable,
        input_type: Hashable | None = None,
    ) -> Any:
        found = self._rule_table.resolve(
            type(value) if input_type is None else input_type, output_type
        )
        return found.invoke(self, value)

    def make_from_iter(
        self,
        values: Iterable[Any],
        output_type: Hashable,
        input_type: Hashable | None = None,
    ) -> Iterator[Any]:
        """Lazily convert every element of ``values``, in order.

        With an explicit ``input_type`` the rule is resolved before the
        first element is consumed.
        """
        if input_type is not None:
            found = self._rule_table.resolve(input_type, output_type)
            return (found.invoke(self, value) for value in values)
        return (self.make_from(value, output_type) for value in values)
