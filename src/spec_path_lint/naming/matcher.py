"""
Matches real file paths against spec path patterns.
"""

import os
import re

from .pattern import PATH_SEPARATOR, SPEC_SUFFIX, FragmentType, PatternFragment, PatternSpec


def normalize_path(path: str) -> str:
	"""Expand `~`, make the path absolute and use '/' as the only separator."""
	absolute = os.path.abspath(os.path.expanduser(path))
	return absolute.replace(os.sep, PATH_SEPARATOR)


def _fragment_regex(fragment: PatternFragment) -> str:
	if fragment.kind == FragmentType.LITERAL:
		return re.escape(fragment.text)
	if fragment.kind == FragmentType.ANY_CHARS:
		return '.*'
	if fragment.kind == FragmentType.ANY_EXCEPT_SEPARATOR:
		return f'[^{re.escape(PATH_SEPARATOR)}]*'
	return re.escape(f"{SPEC_SUFFIX}{fragment.text}")


def render_regex(pattern: PatternSpec) -> str:
	"""Render the pattern as a regular expression anchored at the end of the path, not at its start."""
	return "".join(_fragment_regex(fragment) for fragment in pattern.fragments) + r'\Z'


def matches(actual_path: str, pattern: PatternSpec) -> bool:
	"""True iff the tail of the normalized path satisfies the pattern."""
	return re.search(render_regex(pattern), normalize_path(actual_path)) is not None
