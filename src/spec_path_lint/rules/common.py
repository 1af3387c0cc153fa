"""
Base class for linting rules.

Rules are visitors: the engine hands every rule the top-level nodes of a spec file,
the rule filters the nodes it targets and visits each of them, collecting violations
as errors or warnings according to its configured severity.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Set

from ..model.node_types import ExampleGroupNode, NodeType

SEVERITIES = ("error", "warning")


class LintingRule(ABC):
	"""Base class for all linting rules."""

	def __init__(self, target_node_types: Optional[Set[NodeType]] = None, severity: str = "error"):
		if severity not in SEVERITIES:
			raise ValueError(f"Invalid severity '{severity}', expected one of {SEVERITIES}")
		self.target_node_types: Set[NodeType] = target_node_types or set()
		self.severity = severity
		self.errors: List[str] = []
		self.warnings: List[str] = []

	@classmethod
	def create_from_config(cls, config: Dict[str, Any]) -> 'LintingRule':
		"""Create a rule instance from the 'kwargs' section of its rule configuration."""
		return cls(**config)

	@property
	def error_key(self) -> str:
		"""Key under which this rule's violations are reported."""
		return self.__class__.__name__

	@property
	@abstractmethod
	def error_message(self) -> str:
		"""Short description of what the rule checks."""

	def applies_to(self, node: ExampleGroupNode) -> bool:
		"""A rule without target node types applies to every node."""
		if not self.target_node_types:
			return True
		return node.node_type in self.target_node_types

	def add_violation(self, message: str):
		"""Record a violation as an error or a warning depending on the rule's severity."""
		if self.severity == "warning":
			self.warnings.append(message)
		else:
			self.errors.append(message)

	def process_nodes(self, nodes: List[ExampleGroupNode]):
		"""Visit every node this rule applies to, then run post-processing."""
		self.errors = []
		self.warnings = []

		for node in nodes:
			if self.applies_to(node):
				node.accept(self)

		self.post_process()

	def visit_example_group(self, node: ExampleGroupNode):
		"""Called for each applicable top-level group. Rules override what they need."""

	def post_process(self):
		"""Hook run after all nodes of a file have been visited."""
