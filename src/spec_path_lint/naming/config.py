"""
Immutable configuration for the spec file path check.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

DEFAULT_SPEC_EXTENSION = ".rb"


def _empty_mapping() -> Mapping[str, str]:
	return MappingProxyType({})


@dataclass(frozen=True)
class FilePathConfig:
	"""
	Settings for deriving the expected spec path.

	Attributes:
		custom_transform: Exact segment name -> literal path segment (e.g. {'RuboCop': 'rubocop'}).
		ignore_methods: When True, method descriptors never contribute to the expected path.
		spec_suffix_only: When True, only the `_spec` filename suffix is enforced.
		spec_extension: Extension expected after the `_spec` suffix.
	"""
	custom_transform: Mapping[str, str] = field(default_factory=_empty_mapping)
	ignore_methods: bool = False
	spec_suffix_only: bool = False
	spec_extension: str = DEFAULT_SPEC_EXTENSION

	# custom_transform is a read-only view of a dict, so configs compare by value but can't be hashed
	__hash__ = None

	@classmethod
	def from_values(
		cls,
		custom_transform: Any = None,
		ignore_methods: Any = False,
		spec_suffix_only: Any = False,
		spec_extension: Any = DEFAULT_SPEC_EXTENSION
	) -> 'FilePathConfig':
		"""
		Build a config from loosely typed values (e.g. straight from a JSON config file).

		Malformed values fall back to their defaults instead of raising:
		a non-dict custom_transform becomes empty, non-string entries in it are dropped,
		non-bool flags become False and a non-string or empty extension becomes '.rb'.
		"""
		overrides = {}
		if isinstance(custom_transform, dict):
			overrides = {
				name: segment
				for name, segment in custom_transform.items()
				if isinstance(name, str) and isinstance(segment, str)
			}

		if not isinstance(spec_extension, str) or not spec_extension:
			spec_extension = DEFAULT_SPEC_EXTENSION
		elif not spec_extension.startswith('.'):
			spec_extension = f".{spec_extension}"

		return cls(
			custom_transform=MappingProxyType(overrides),
			ignore_methods=ignore_methods if isinstance(ignore_methods, bool) else False,
			spec_suffix_only=spec_suffix_only if isinstance(spec_suffix_only, bool) else False,
			spec_extension=spec_extension,
		)
