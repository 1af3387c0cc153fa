"""
Linting rules. Importing this package registers every rule in RULES_MAP.
"""

from .common import LintingRule
from .registry import RULES_MAP, register_rule
from .paths.file_path import FilePathRule

__all__ = ["LintingRule", "RULES_MAP", "register_rule", "FilePathRule"]
