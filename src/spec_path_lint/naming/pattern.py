"""
Builds the expected spec path pattern for a described subject.

A pattern is an ordered list of typed fragments rather than a regular expression string,
so that the method name is always treated as literal text and the display form shown
in violation messages can be derived without rewriting a regex.

For `describe MyClass, '#method'` the pattern is:

	LITERAL('my_class') ANY_CHARS LITERAL('method') ANY_EXCEPT_SEPARATOR REQUIRED_SUFFIX('.rb')

which is displayed as `my_class*method*_spec.rb`.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .config import FilePathConfig
from .subject import DescribedSubject
from .transform import transform_segment

SPEC_SUFFIX = "_spec"
PATH_SEPARATOR = "/"

_NON_WORD = re.compile(r'\W', re.ASCII)


class FragmentType(Enum):
	"""Kinds of fragments a spec path pattern is composed of."""
	LITERAL = "literal"
	ANY_CHARS = "any_chars"
	ANY_EXCEPT_SEPARATOR = "any_except_separator"
	REQUIRED_SUFFIX = "required_suffix"


@dataclass(frozen=True)
class PatternFragment:
	"""
	A single piece of a spec path pattern.

	For LITERAL, text is matched literally. For REQUIRED_SUFFIX, text is the file extension
	expected after `_spec`. The wildcard kinds carry no text.
	"""
	kind: FragmentType
	text: str = ""

	def to_glob(self) -> str:
		if self.kind == FragmentType.LITERAL:
			return self.text
		if self.kind == FragmentType.REQUIRED_SUFFIX:
			return f"{SPEC_SUFFIX}{self.text}"
		return "*"


@dataclass(frozen=True)
class PatternSpec:
	"""Ordered fragments that the end of a spec file path has to match."""
	fragments: Tuple[PatternFragment, ...]

	def to_glob(self) -> str:
		"""Render a glob-like form for messages. Display only, never used for matching."""
		return "".join(fragment.to_glob() for fragment in self.fragments)


def literal(text: str) -> PatternFragment:
	return PatternFragment(FragmentType.LITERAL, text)


ANY_CHARS = PatternFragment(FragmentType.ANY_CHARS)
ANY_EXCEPT_SEPARATOR = PatternFragment(FragmentType.ANY_EXCEPT_SEPARATOR)


def required_suffix(extension: str) -> PatternFragment:
	return PatternFragment(FragmentType.REQUIRED_SUFFIX, extension)


def expected_class_path(subject: DescribedSubject, config: FilePathConfig) -> str:
	"""Join the transformed namespace segments into a relative path, e.g. Foo::BarBaz -> foo/bar_baz."""
	return PATH_SEPARATOR.join(
		transform_segment(segment, config.custom_transform) for segment in subject.class_segments
	)


def method_name_fragment(method: str) -> str:
	"""Strip every non-word character from a method descriptor: '#method?' -> 'method'."""
	return _NON_WORD.sub('', method)


def spec_suffix_only_pattern(config: FilePathConfig) -> PatternSpec:
	return PatternSpec((ANY_CHARS, required_suffix(config.spec_extension)))


def build_pattern(subject: DescribedSubject, config: FilePathConfig) -> PatternSpec:
	"""Compose the pattern the spec file path of `subject` must end with."""
	if config.spec_suffix_only:
		return spec_suffix_only_pattern(config)

	fragments = [literal(expected_class_path(subject, config))]

	if subject.method is not None and not config.ignore_methods:
		fragments.append(ANY_CHARS)
		method_name = method_name_fragment(subject.method)
		if method_name:
			fragments.append(literal(method_name))

	fragments.append(ANY_EXCEPT_SEPARATOR)
	fragments.append(required_suffix(config.spec_extension))
	return PatternSpec(tuple(fragments))
