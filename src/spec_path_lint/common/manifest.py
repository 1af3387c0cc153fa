"""
Reading spec manifests from disk.
"""

import json
from collections import OrderedDict
from pathlib import Path
from typing import Any, Dict, List, Union

from ..model.builder import ManifestError, SpecManifestBuilder
from ..model.node_types import SpecFile


def read_json_file(file_path: Union[str, Path]) -> Dict[str, Any]:
	"""
	Read a JSON object from a file, preserving key order.

	Raises ManifestError if the file can't be read or parsed, or doesn't hold a JSON object.
	"""
	try:
		with open(file_path, 'r', encoding='utf-8') as f:
			data = json.load(f, object_pairs_hook=OrderedDict)
	except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
		raise ManifestError(f"Error reading or parsing file {file_path}: {e}") from e

	if not isinstance(data, dict):
		raise ManifestError(f"Error reading file {file_path}: expected a JSON object at the top level")
	return data


def load_spec_files(manifest_path: Union[str, Path]) -> List[SpecFile]:
	"""
	Load the spec files described by a manifest.

	Relative spec paths are resolved against the manifest's directory.
	Raises ManifestError if the manifest can't be read or is structurally invalid.
	"""
	manifest_path = Path(manifest_path)
	data = read_json_file(manifest_path)
	return SpecManifestBuilder().build(data, base_dir=manifest_path.resolve().parent)
