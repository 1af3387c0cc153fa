"""
Registry of available linting rules, keyed by class name.
"""

from typing import Dict, Type

RULES_MAP: Dict[str, Type] = {}


def register_rule(rule_class: Type) -> Type:
	"""Class decorator that makes a rule available to the rule configuration."""
	if rule_class.__name__ in RULES_MAP:
		raise ValueError(f"Rule '{rule_class.__name__}' is already registered")
	RULES_MAP[rule_class.__name__] = rule_class
	return rule_class
