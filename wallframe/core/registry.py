"""Rule registry: which placement rules exist and the order they run in."""

from __future__ import annotations

from wallframe.models import FramingContext, GenerationConfig
from wallframe.rules.base import FramingRule


class RuleRegistry:
    """
    Placement rules keyed by id.

    For a given wall, `get_applicable_rules` keeps the rules selected by
    the generation options whose `applies()` is true, orders them by
    priority, and then moves any rule behind the rules it depends on.
    A dependency that was filtered out is ignored.
    """

    def __init__(self) -> None:
        self._rules: dict[str, FramingRule] = {}

    def register(self, rule: FramingRule) -> None:
        """Add a rule, replacing any rule with the same id."""
        self._rules[rule.get_id()] = rule

    def unregister(self, rule_id: str) -> None:
        self._rules.pop(rule_id, None)

    def get_rule(self, rule_id: str) -> FramingRule | None:
        return self._rules.get(rule_id)

    def list_rules(self) -> list[FramingRule]:
        """All registered rules in registration order."""
        return list(self._rules.values())

    def get_applicable_rules(self, context: FramingContext) -> list[FramingRule]:
        selected = [
            rule for rule in self._rules.values()
            if self._is_selected(rule.get_id(), context.options) and rule.applies(context)
        ]
        selected.sort(key=lambda rule: rule.priority)
        return self._dependency_order(selected)

    @staticmethod
    def _is_selected(rule_id: str, options: GenerationConfig) -> bool:
        if options.enabled_rules and rule_id not in options.enabled_rules:
            return False
        return rule_id not in options.disabled_rules

    @staticmethod
    def _dependency_order(rules: list[FramingRule]) -> list[FramingRule]:
        by_id = {rule.get_id(): rule for rule in rules}
        placed: list[FramingRule] = []
        seen: set[str] = set()

        def place(rule: FramingRule) -> None:
            rule_id = rule.get_id()
            if rule_id in seen:
                return
            seen.add(rule_id)
            for dep_id in rule.dependencies:
                dep = by_id.get(dep_id)
                if dep is not None:
                    place(dep)
            placed.append(rule)

        for rule in rules:
            place(rule)
        return placed


def create_default_registry() -> RuleRegistry:
    """Registry holding the plate, stud, opening and fire-blocking rules."""
    from wallframe.rules.wall.platform_frame import PlateRule, StudRule
    from wallframe.rules.wall.opening_frame import OpeningFramingRule
    from wallframe.rules.wall.fire_blocking import FireBlockingRule

    registry = RuleRegistry()
    for rule in (PlateRule(), StudRule(), OpeningFramingRule(), FireBlockingRule()):
        registry.register(rule)
    return registry
