"""
Converts class/module name segments into the path segments spec files are expected to use.

Examples:
	CamelCase  -> camel_case
	HTTPStatus -> http_status
	APIClient  -> api_client
"""

import re
from typing import Mapping

# A lowercase (or non-letter) character followed by an uppercase run: myHTTP -> my_HTTP
_WORD_START = re.compile(r'([^A-Z])([A-Z]+)')
# An acronym followed by a capitalized word: HTTPStatus -> HTTP_Status
_ACRONYM_END = re.compile(r'([A-Z])([A-Z][^A-Z\d]+)')


def camel_to_snake_case(segment: str) -> str:
	"""Convert a CamelCase segment to snake_case. Already snake_cased input is returned unchanged."""
	segment = _WORD_START.sub(r'\1_\2', segment)
	segment = _ACRONYM_END.sub(r'\1_\2', segment)
	return segment.lower()


def transform_segment(segment: str, overrides: Mapping[str, str]) -> str:
	"""
	Resolve a single name segment to its path segment.

	An exact match in overrides is returned verbatim, without any case conversion.
	"""
	if segment in overrides:
		return overrides[segment]
	return camel_to_snake_case(segment)
