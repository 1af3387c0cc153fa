"""
Builds SpecFile models from spec manifest JSON.

Manifest layout:

	{
		"files": [
			{
				"path": "spec/models/my_class_spec.rb",
				"top_level_groups": [
					{
						"method": "describe",
						"receiver": "RSpec",
						"line": 3,
						"arguments": [
							{"type": "const", "value": "MyClass"},
							{"type": "str", "value": "#method"}
						]
					}
				]
			}
		]
	}

Relative file paths are resolved against the directory the manifest lives in.
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .node_types import ArgumentNode, ArgumentType, ExampleGroupNode, NodeType, SpecFile


class ManifestError(ValueError):
	"""Raised when a spec manifest entry does not have the expected structure."""


class SpecManifestBuilder:
	"""Turns manifest dictionaries into SpecFile / ExampleGroupNode / ArgumentNode objects."""

	def build(self, manifest: Dict[str, Any], base_dir: Optional[Union[str, Path]] = None) -> List[SpecFile]:
		files = manifest.get('files', [])
		if not isinstance(files, list):
			raise ManifestError("'files' must be a list")
		return [self.build_spec_file(entry, base_dir) for entry in files]

	def build_spec_file(self, entry: Any, base_dir: Optional[Union[str, Path]] = None) -> SpecFile:
		if not isinstance(entry, dict) or not isinstance(entry.get('path'), str):
			raise ManifestError(f"Spec file entry must be an object with a 'path' string: {entry!r}")

		file_path = entry['path']
		if base_dir is not None and not os.path.isabs(file_path):
			file_path = os.path.join(str(base_dir), file_path)

		groups = entry.get('top_level_groups', [])
		if not isinstance(groups, list):
			raise ManifestError(f"{entry['path']}: 'top_level_groups' must be a list")

		spec_file = SpecFile(path=file_path)
		for group in groups:
			spec_file.top_level_groups.append(self._build_group(group, file_path))
		return spec_file

	def _build_group(self, group: Any, file_path: str) -> ExampleGroupNode:
		if not isinstance(group, dict) or not isinstance(group.get('method'), str):
			raise ManifestError(f"{file_path}: top-level group must be an object with a 'method' string")

		arguments = group.get('arguments', [])
		if not isinstance(arguments, list):
			raise ManifestError(f"{file_path}: 'arguments' of '{group['method']}' must be a list")

		receiver = group.get('receiver')
		line = group.get('line')
		return ExampleGroupNode(
			file_path=file_path,
			method=group['method'],
			node_type=NodeType.for_call(group['method'], receiver),
			arguments=tuple(self._build_argument(argument, file_path) for argument in arguments),
			receiver=receiver if isinstance(receiver, str) else None,
			line=line if isinstance(line, int) else None,
		)

	def _build_argument(self, argument: Any, file_path: str) -> ArgumentNode:
		if not isinstance(argument, dict) or not isinstance(argument.get('type'), str):
			raise ManifestError(f"{file_path}: argument node must be an object with a 'type' string")

		children = argument.get('children', [])
		if not isinstance(children, list):
			raise ManifestError(f"{file_path}: 'children' of a '{argument['type']}' node must be a list")

		return ArgumentNode(
			arg_type=ArgumentType.from_string(argument['type']),
			value=argument.get('value'),
			children=tuple(self._build_argument(child, file_path) for child in children),
		)
