"""
Unit tests for matching spec paths against patterns.
"""

import os
import unittest

from spec_path_lint.naming.config import FilePathConfig
from spec_path_lint.naming.matcher import matches, normalize_path, render_regex
from spec_path_lint.naming.pattern import build_pattern
from spec_path_lint.naming.subject import DescribedSubject


def pattern_for(name, method=None, **config):
	return build_pattern(DescribedSubject.from_qualified_name(name, method), FilePathConfig.from_values(**config))


class TestRenderRegex(unittest.TestCase):
	"""Test rendering patterns into regular expressions."""

	def test_class_only(self):
		self.assertEqual(render_regex(pattern_for("MyClass")), r'my_class[^/]*_spec\.rb\Z')

	def test_class_and_method(self):
		self.assertEqual(render_regex(pattern_for("MyClass", "#method")), r'my_class.*method[^/]*_spec\.rb\Z')

	def test_literal_text_is_escaped(self):
		regex = render_regex(pattern_for("Cpp", custom_transform={"Cpp": "c++"}))
		self.assertTrue(regex.startswith(r'c\+\+'))


class TestNormalizePath(unittest.TestCase):
	"""Test path normalization."""

	def test_relative_path_becomes_absolute(self):
		normalized = normalize_path("spec/my_class_spec.rb")
		self.assertTrue(os.path.isabs(normalized))
		self.assertTrue(normalized.endswith("/spec/my_class_spec.rb"))

	def test_dot_segments_are_collapsed(self):
		self.assertTrue(normalize_path("spec/./models/../my_class_spec.rb").endswith("/spec/my_class_spec.rb"))


class TestMatches(unittest.TestCase):
	"""Test end-anchored matching."""

	def test_exact_file_name(self):
		self.assertTrue(matches("/project/spec/my_class_spec.rb", pattern_for("MyClass")))

	def test_file_name_with_extra_characters_before_suffix(self):
		self.assertTrue(matches("/project/spec/my_class_extra_spec.rb", pattern_for("MyClass")))

	def test_wrong_file_name(self):
		self.assertFalse(matches("/project/spec/whatever_spec.rb", pattern_for("MyClass")))

	def test_missing_spec_suffix(self):
		self.assertFalse(matches("/project/spec/my_class.rb", pattern_for("MyClass")))

	def test_anchored_at_the_end(self):
		self.assertFalse(matches("/project/spec/my_class_spec.rb.bak", pattern_for("MyClass")))

	def test_suffix_must_be_in_the_file_name(self):
		"""The part after the class path may not cross a directory separator."""
		self.assertFalse(matches("/project/spec/my_class/other_spec.rb", pattern_for("MyClass")))

	def test_namespaced_class(self):
		pattern = pattern_for("Foo::BarBaz")
		self.assertTrue(matches("/project/spec/lib/foo/bar_baz_spec.rb", pattern))
		self.assertFalse(matches("/project/spec/lib/foo_bar_baz_spec.rb", pattern))

	def test_method_in_file_name(self):
		self.assertTrue(matches("/project/spec/my_class_method_spec.rb", pattern_for("MyClass", "#method")))

	def test_method_in_sub_directory(self):
		self.assertTrue(matches("/project/spec/my_class/method_spec.rb", pattern_for("MyClass", "#method")))

	def test_method_missing_from_path(self):
		self.assertFalse(matches("/project/spec/my_class_spec.rb", pattern_for("MyClass", "#method")))

	def test_literal_segment_is_not_a_regex(self):
		pattern = pattern_for("Dotted", custom_transform={"Dotted": "a.b"})
		self.assertTrue(matches("/project/spec/a.b_spec.rb", pattern))
		self.assertFalse(matches("/project/spec/axb_spec.rb", pattern))

	def test_relative_path(self):
		self.assertTrue(matches("spec/my_class_spec.rb", pattern_for("MyClass")))


if __name__ == '__main__':
	unittest.main()
