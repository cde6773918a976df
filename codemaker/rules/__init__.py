"""Type-directed conversion rules."""

from codemaker.rules.models import Rule, RuleKey, RuleTable
from codemaker.rules.registry import Role, RoleMeta, rule

__all__ = ["Role", "RoleMeta", "Rule", "RuleKey", "RuleTable", "rule"]
