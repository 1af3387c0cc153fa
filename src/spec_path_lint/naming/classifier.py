"""
Decides whether a test group is exempt from the spec file path check.
"""

from typing import Iterable, Tuple

from ..model.node_types import ArgumentNode, ArgumentType

MetadataPair = Tuple[ArgumentNode, ArgumentNode]

ROUTING_KEY = "type"
ROUTING_VALUE = "routing"


def _is_symbol(node: ArgumentNode, name: str) -> bool:
	return node.arg_type == ArgumentType.SYM and node.value == name


def is_routing_spec(metadata: Iterable[MetadataPair]) -> bool:
	"""True iff the metadata contains the pair `type: :routing` (symbol key and symbol value)."""
	return any(_is_symbol(key, ROUTING_KEY) and _is_symbol(value, ROUTING_VALUE) for key, value in metadata)
