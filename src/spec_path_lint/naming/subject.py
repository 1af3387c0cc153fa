"""
The subject a top-level test group describes: a qualified class/module name and an optional method.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

NAMESPACE_SEPARATOR = "::"


@dataclass(frozen=True)
class DescribedSubject:
	"""
	Attributes:
		class_segments: Namespace segments, outermost first (e.g. ('RuboCop', 'Cop', 'FilePath')).
		method: Method descriptor taken verbatim from the group call (e.g. '#method', '.class_method').
	"""
	class_segments: Tuple[str, ...]
	method: Optional[str] = None

	@classmethod
	def from_qualified_name(cls, qualified_name: str, method: Optional[str] = None) -> 'DescribedSubject':
		"""Split 'Outer::Inner' into segments. Empty segments, such as a leading '::', are dropped."""
		segments = tuple(segment for segment in qualified_name.split(NAMESPACE_SEPARATOR) if segment)
		return cls(class_segments=segments, method=method)
