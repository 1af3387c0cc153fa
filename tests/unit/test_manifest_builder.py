"""
Unit tests for building spec file models from manifests.
"""

import json
import os
import shutil
import tempfile
import unittest
from pathlib import Path

from spec_path_lint.common.manifest import load_spec_files, read_json_file
from spec_path_lint.model.builder import ManifestError, SpecManifestBuilder
from spec_path_lint.model.node_types import ArgumentType, NodeType

from fixtures.test_helpers import const, make_group, metadata, string


class TestSpecManifestBuilder(unittest.TestCase):
	"""Test manifest dict -> SpecFile conversion."""

	def setUp(self):  # pylint: disable=invalid-name
		self.builder = SpecManifestBuilder()

	def test_build_spec_file(self):
		manifest = {
			"files": [{
				"path": "/project/spec/my_class_spec.rb",
				"top_level_groups": [
					make_group(const("MyClass"), string("#method"), metadata(type="model"), receiver="RSpec", line=4)
				],
			}]
		}
		spec_files = self.builder.build(manifest)

		self.assertEqual(len(spec_files), 1)
		spec_file = spec_files[0]
		self.assertEqual(spec_file.path, "/project/spec/my_class_spec.rb")

		group = spec_file.top_level_groups[0]
		self.assertEqual(group.method, "describe")
		self.assertEqual(group.receiver, "RSpec")
		self.assertEqual(group.line, 4)
		self.assertEqual(group.node_type, NodeType.EXAMPLE_GROUP)
		self.assertEqual(group.path, "/project/spec/my_class_spec.rb:4")
		self.assertEqual(
			[argument.arg_type for argument in group.arguments], [ArgumentType.CONST, ArgumentType.STR, ArgumentType.HASH]
		)
		pair = group.arguments[2].children[0]
		self.assertEqual(pair.arg_type, ArgumentType.PAIR)
		self.assertEqual([child.value for child in pair.children], ["type", "model"])

	def test_relative_paths_resolved_against_base_dir(self):
		manifest = {"files": [{"path": "spec/a_spec.rb", "top_level_groups": []}]}
		spec_file = self.builder.build(manifest, base_dir="/project")[0]
		self.assertEqual(spec_file.path, os.path.join("/project", "spec/a_spec.rb"))

	def test_absolute_paths_are_kept(self):
		manifest = {"files": [{"path": "/elsewhere/a_spec.rb"}]}
		self.assertEqual(self.builder.build(manifest, base_dir="/project")[0].path, "/elsewhere/a_spec.rb")

	def test_node_types(self):
		cases = [
			("describe", None, NodeType.EXAMPLE_GROUP),
			("xcontext", None, NodeType.EXAMPLE_GROUP),
			("fdescribe", "RSpec", NodeType.EXAMPLE_GROUP),
			("describe", "::RSpec", NodeType.EXAMPLE_GROUP),
			("shared_examples", None, NodeType.SHARED_GROUP),
			("shared_context", "RSpec", NodeType.SHARED_GROUP),
			("describe", "Foo", NodeType.OTHER),
			("require", None, NodeType.OTHER),
		]
		for method, receiver, expected in cases:
			with self.subTest(method=method, receiver=receiver):
				group = make_group(method=method, receiver=receiver)
				spec_file = self.builder.build_spec_file({"path": "/p/a_spec.rb", "top_level_groups": [group]})
				self.assertEqual(spec_file.top_level_groups[0].node_type, expected)

	def test_unknown_argument_type(self):
		group = make_group({"type": "send", "value": "foo"})
		spec_file = self.builder.build_spec_file({"path": "/p/a_spec.rb", "top_level_groups": [group]})
		self.assertEqual(spec_file.top_level_groups[0].arguments[0].arg_type, ArgumentType.OTHER)

	def test_missing_files_key(self):
		self.assertEqual(self.builder.build({}), [])

	def test_invalid_entries_raise(self):
		invalid_manifests = [
			{"files": "spec/a_spec.rb"},
			{"files": [{"top_level_groups": []}]},
			{"files": [{"path": "a_spec.rb", "top_level_groups": {}}]},
			{"files": [{"path": "a_spec.rb", "top_level_groups": [{"arguments": []}]}]},
			{"files": [{"path": "a_spec.rb", "top_level_groups": [{"method": "describe", "arguments": "MyClass"}]}]},
			{"files": [{"path": "a_spec.rb", "top_level_groups": [make_group({"value": "MyClass"})]}]},
			{"files": [{"path": "a_spec.rb", "top_level_groups": [make_group({"type": "hash", "children": {}})]}]},
		]
		for manifest in invalid_manifests:
			with self.subTest(manifest=manifest):
				with self.assertRaises(ManifestError):
					self.builder.build(manifest)


class TestManifestFiles(unittest.TestCase):
	"""Test reading manifests from disk."""

	def setUp(self):
		self.temp_dir = tempfile.mkdtemp()
		self.temp_path = Path(self.temp_dir)

	def tearDown(self):
		shutil.rmtree(self.temp_dir, ignore_errors=True)

	def test_load_spec_files_resolves_against_manifest_dir(self):
		manifest_file = self.temp_path / "spec_manifest.json"
		manifest_file.write_text(json.dumps({"files": [{"path": "spec/a_spec.rb"}]}))

		spec_files = load_spec_files(manifest_file)

		self.assertEqual(len(spec_files), 1)
		self.assertEqual(Path(spec_files[0].path), self.temp_path.resolve() / "spec" / "a_spec.rb")

	def test_invalid_json_raises(self):
		manifest_file = self.temp_path / "spec_manifest.json"
		manifest_file.write_text("{not json")
		with self.assertRaises(ManifestError):
			read_json_file(manifest_file)
		with self.assertRaises(ManifestError):
			load_spec_files(manifest_file)

	def test_missing_file_raises(self):
		with self.assertRaises(ManifestError):
			load_spec_files(self.temp_path / "missing.json")

	def test_top_level_array_raises(self):
		manifest_file = self.temp_path / "spec_manifest.json"
		manifest_file.write_text("[]")
		with self.assertRaises(ManifestError):
			load_spec_files(manifest_file)

	def test_empty_object_has_no_spec_files(self):
		manifest_file = self.temp_path / "spec_manifest.json"
		manifest_file.write_text("{}")
		self.assertEqual(load_spec_files(manifest_file), [])


if __name__ == '__main__':
	unittest.main()
