"""Signal rule registry with auto-discovery of SignalRule subclasses."""

from __future__ import annotations

import importlib
import logging
import pkgutil

from training_engine.rules.base import SignalRule

logger = logging.getLogger(__name__)


class SignalRuleRegistry:
    """Discovers and manages all SignalRule implementations.

    Auto-discovers rules by scanning the rules/ package tree for any
    concrete subclasses of SignalRule. New rules are added simply by
    placing a module in the appropriate subpackage.
    """

    def __init__(self) -> None:
        self._rules: dict[str, SignalRule] = {}

    def discover_rules(self) -> None:
        """Scan the rules package tree and register all SignalRule subclasses."""
        import training_engine.rules as rules_pkg

        self._scan_package(rules_pkg.__name__, list(rules_pkg.__path__))

    def _scan_package(self, package_name: str, package_path: list[str]) -> None:
        """Recursively import all modules under a package and register rules."""
        for _, module_name, _ in pkgutil.walk_packages(
            package_path, prefix=package_name + "."
        ):
            module = importlib.import_module(module_name)
            for attr_name in dir(module):
                attr = getattr(module, attr_name)
                if (
                    isinstance(attr, type)
                    and issubclass(attr, SignalRule)
                    and attr is not SignalRule
                    and not getattr(attr, "__abstractmethods__", set())
                    and attr.__module__ == module.__name__
                ):
                    self.register(attr())
        logger.debug("Registered %d signal rules", len(self._rules))

    def register(self, rule: SignalRule) -> None:
        """Register a rule instance by its rule_id."""
        self._rules[rule.rule_id] = rule

    def get(self, rule_id: str) -> SignalRule | None:
        return self._rules.get(rule_id)

    def get_all_rules(self) -> list[SignalRule]:
        """Return all registered rules in evaluation order."""
        return sorted(self._rules.values(), key=lambda r: r.sort_key)

    @property
    def rule_ids(self) -> list[str]:
        return [rule.rule_id for rule in self.get_all_rules()]
