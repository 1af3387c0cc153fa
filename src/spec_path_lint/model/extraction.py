"""
Extracts the inputs of the spec file path check from a top-level group node.

	RSpec.describe Foo::Bar, '#baz', type: :routing do
	               ^^^^^^^^                           described class
	                         ^^^^^^                   method descriptor (literal strings only)
	                         ^^^^^^^^^^^^^^^^^^^^^^^  trailing arguments searched for metadata pairs
"""

from typing import List, Optional, Tuple

from ..naming.subject import DescribedSubject
from .node_types import ArgumentNode, ArgumentType, ExampleGroupNode, NodeType

ExampleMetadataSet = Tuple[Tuple[ArgumentNode, ArgumentNode], ...]


def extract_described_subject(node: ExampleGroupNode) -> Optional[DescribedSubject]:
	"""
	Return the described subject of an example group, or None when the group does not describe a constant.

	`describe 'some behaviour'` and shared groups have no described subject.
	"""
	if node.node_type != NodeType.EXAMPLE_GROUP or not node.arguments:
		return None

	described = node.arguments[0]
	if described.arg_type != ArgumentType.CONST or not isinstance(described.value, str):
		return None

	method = None
	trailing = node.arguments[1:]
	if trailing and trailing[0].is_literal_string():
		method = trailing[0].value

	return DescribedSubject.from_qualified_name(described.value, method)


def extract_metadata(node: ExampleGroupNode) -> ExampleMetadataSet:
	"""Collect every key/value pair found in the arguments after the described class, nested ones included."""
	pairs: List[Tuple[ArgumentNode, ArgumentNode]] = []
	for argument in node.arguments[1:]:
		for child in argument.walk():
			if child.arg_type == ArgumentType.PAIR and len(child.children) == 2:
				pairs.append((child.children[0], child.children[1]))
	return tuple(pairs)
