"""
Runs the spec file path check for one described subject.

	diagnose(subject, metadata, config, path)
		-> SKIPPED                       routing specs are not checked
		-> Diagnosis(passed=True)        path ends with the expected pattern
		-> Diagnosis(passed=False, ...)  expected_suffix holds the glob-like display form
"""

from dataclasses import dataclass
from typing import Iterable, Union

from .classifier import MetadataPair, is_routing_spec
from .config import FilePathConfig
from .matcher import matches
from .pattern import build_pattern
from .subject import DescribedSubject

MESSAGE = "Spec path should end with `{suffix}`."


@dataclass(frozen=True)
class Diagnosis:
	"""Outcome of checking a spec file path."""
	passed: bool
	expected_suffix: str = ""

	@property
	def message(self) -> str:
		return MESSAGE.format(suffix=self.expected_suffix)


@dataclass(frozen=True)
class Skipped:
	"""The check does not apply to the test group."""
	reason: str


SKIPPED = Skipped(reason="routing spec")


def diagnose(
	subject: DescribedSubject, metadata: Iterable[MetadataPair], config: FilePathConfig, actual_path: str
) -> Union[Diagnosis, Skipped]:
	if is_routing_spec(metadata):
		return SKIPPED

	pattern = build_pattern(subject, config)
	if matches(actual_path, pattern):
		return Diagnosis(passed=True)
	return Diagnosis(passed=False, expected_suffix=pattern.to_glob())
