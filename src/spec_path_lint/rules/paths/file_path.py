"""
Rule to check that spec file paths are consistent with the subject they describe.

By default the path must reflect the described class/module and, when one is called out,
the described method:

	# bad
	whatever_spec.rb          # describe MyClass
	my_class_spec.rb          # describe MyClass, '#method'

	# good
	my_class_spec.rb          # describe MyClass
	my_class_method_spec.rb   # describe MyClass, '#method'
	my_class/method_spec.rb   # describe MyClass, '#method'

CONFIGURATION:
- custom_transform: segments that should not be converted from CamelCase to snake_case
  the usual way (e.g. {"RuboCop": "rubocop"})
- ignore_methods: ignore the called out method when determining the expected path
- spec_suffix_only: only check that the file name ends in `_spec.rb`
- spec_extension: extension expected after `_spec` (default ".rb")

Routing specs (`type: :routing`) are not checked, and neither are files with more than
one top-level group.
"""

from typing import Any, List

from ..common import LintingRule
from ..registry import register_rule
from ...model.extraction import extract_described_subject, extract_metadata
from ...model.node_types import ExampleGroupNode, NodeType, NodeUtils
from ...naming.config import DEFAULT_SPEC_EXTENSION, FilePathConfig
from ...naming.diagnoser import Diagnosis, diagnose


@register_rule
class FilePathRule(LintingRule):
	"""Checks that spec file paths end with the path derived from the described subject."""

	def __init__(
		self,
		custom_transform: Any = None,
		ignore_methods: Any = False,
		spec_suffix_only: Any = False,
		spec_extension: Any = DEFAULT_SPEC_EXTENSION,
		severity: str = "error"
	):
		"""
		Initialize the rule.

		Args:
			custom_transform: Mapping of exact class/module names to literal path segments
			ignore_methods: Ignore method descriptors when building the expected path
			spec_suffix_only: Only enforce the `_spec` suffix
			spec_extension: File extension expected after `_spec`
			severity: Severity level - "error" (default) or "warning"
		"""
		super().__init__({NodeType.EXAMPLE_GROUP}, severity)
		self.config = FilePathConfig.from_values(
			custom_transform=custom_transform,
			ignore_methods=ignore_methods,
			spec_suffix_only=spec_suffix_only,
			spec_extension=spec_extension,
		)
		self.skipped_groups: List[str] = []

	@property
	def error_message(self) -> str:
		return "Spec file paths should reflect the described class and method"

	def process_nodes(self, nodes: List[ExampleGroupNode]):
		"""Only check files with exactly one top-level spec group."""
		self.errors = []
		self.warnings = []
		self.skipped_groups = []

		if len(NodeUtils.spec_groups(nodes)) != 1:
			return

		super().process_nodes(nodes)

	def visit_example_group(self, node: ExampleGroupNode):
		subject = extract_described_subject(node)
		if subject is None:
			return

		result = diagnose(subject, extract_metadata(node), self.config, node.file_path)
		if not isinstance(result, Diagnosis):
			self.skipped_groups.append(node.path)
			return

		if not result.passed:
			self.add_violation(f"{node.path}: {result.message}")
