"""
Node types for the top-level test groups of a spec file.

The nodes are built from a spec manifest (see builder.py): a JSON description of each spec
file's top-level group calls and their arguments, produced by an external syntax-tree query.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, List, Optional, Set, Tuple

EXAMPLE_GROUP_METHODS = frozenset({
	'describe', 'context', 'feature', 'example_group',
	'xdescribe', 'xcontext', 'xfeature',
	'fdescribe', 'fcontext', 'ffeature',
})
SHARED_GROUP_METHODS = frozenset({'shared_examples', 'shared_context', 'shared_examples_for'})
RSPEC_RECEIVERS = frozenset({None, 'RSpec', '::RSpec'})


class NodeType(Enum):
	"""Kinds of top-level calls found in a spec file."""
	EXAMPLE_GROUP = "example_group"
	SHARED_GROUP = "shared_group"
	OTHER = "other"

	@classmethod
	def for_call(cls, method: str, receiver: Optional[str]) -> 'NodeType':
		"""Classify a call by its method name and receiver (only bare or RSpec. calls are groups)."""
		if receiver not in RSPEC_RECEIVERS:
			return cls.OTHER
		if method in EXAMPLE_GROUP_METHODS:
			return cls.EXAMPLE_GROUP
		if method in SHARED_GROUP_METHODS:
			return cls.SHARED_GROUP
		return cls.OTHER


class ArgumentType(Enum):
	"""Syntax node types an argument of a group call can have."""
	CONST = "const"
	STR = "str"
	DSTR = "dstr"
	SYM = "sym"
	HASH = "hash"
	PAIR = "pair"
	OTHER = "other"

	@classmethod
	def from_string(cls, value: str) -> 'ArgumentType':
		try:
			return cls(value)
		except ValueError:
			return cls.OTHER


@dataclass(frozen=True)
class ArgumentNode:
	"""
	An argument of a group call, or a node nested in one.

	value holds the literal for const/str/sym nodes (a const's value is its qualified name).
	children holds nested nodes: the pairs of a hash, the key and value of a pair.
	"""
	arg_type: ArgumentType
	value: Any = None
	children: Tuple['ArgumentNode', ...] = ()

	def is_literal_string(self) -> bool:
		return self.arg_type == ArgumentType.STR and isinstance(self.value, str)

	def walk(self) -> Iterator['ArgumentNode']:
		"""Yield this node and all of its descendants, depth first."""
		yield self
		for child in self.children:
			yield from child.walk()


@dataclass
class ExampleGroupNode:
	"""A top-level call in a spec file, e.g. `RSpec.describe MyClass, '#method', type: :model`."""
	file_path: str
	method: str
	node_type: NodeType
	arguments: Tuple[ArgumentNode, ...] = ()
	receiver: Optional[str] = None
	line: Optional[int] = None

	@property
	def path(self) -> str:
		"""Location used in violation messages: the file path, plus the line when known."""
		if self.line is None:
			return self.file_path
		return f"{self.file_path}:{self.line}"

	def is_spec_group(self) -> bool:
		return self.node_type in (NodeType.EXAMPLE_GROUP, NodeType.SHARED_GROUP)

	def accept(self, visitor):
		return visitor.visit_example_group(self)


@dataclass
class SpecFile:
	"""A spec file and its top-level calls, in source order."""
	path: str
	top_level_groups: List[ExampleGroupNode] = field(default_factory=list)


class NodeUtils:
	"""Helpers for working with collections of nodes."""

	@staticmethod
	def filter_by_types(nodes: List[ExampleGroupNode], node_types: Set[NodeType]) -> List[ExampleGroupNode]:
		return [node for node in nodes if node.node_type in node_types]

	@staticmethod
	def spec_groups(nodes: List[ExampleGroupNode]) -> List[ExampleGroupNode]:
		return [node for node in nodes if node.is_spec_group()]
