"""
Command-line interface for spec-path-lint.
"""

import argparse
import glob
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Set, Tuple

from importlib.metadata import version, PackageNotFoundError

from .common.manifest import load_spec_files
from .linter import LintEngine, LintResults
from .model.builder import ManifestError
from .model.node_types import SpecFile
from .rules import RULES_MAP

DEFAULT_MANIFEST_GLOB = "**/spec_manifest.json"
DEFAULT_WHITELIST_OUTPUT = ".spec-path-lint-whitelist.txt"


def get_version() -> str:
	"""Get package version, with fallback for development/testing."""
	try:
		return version('spec-path-lint')
	except PackageNotFoundError:
		# Package not installed (development/testing mode), read pyproject.toml instead
		import tomllib

		pyproject_path = Path(__file__).parent.parent.parent / 'pyproject.toml'
		if not pyproject_path.exists():
			return 'dev'
		try:
			with open(pyproject_path, 'rb') as f:
				data = tomllib.load(f)
		except (OSError, tomllib.TOMLDecodeError):
			return 'dev'
		return data.get('project', {}).get('version', 'dev')


def load_config(config_path: str) -> dict:
	"""Load configuration from a JSON file."""
	try:
		with open(config_path, 'r', encoding='utf-8') as f:
			return json.load(f)
	except (FileNotFoundError, json.JSONDecodeError) as e:
		print(f"Error loading config file {config_path}: {e}")
		return {}


def create_rules_from_config(config: dict) -> list:
	"""
	Create rule instances from config dictionary.

	Args:
		config: Configuration dictionary from config file
	"""
	rules = []
	for rule_name, rule_config in config.items():
		# Skip private keys or invalid configurations
		if rule_name.startswith("_") or not isinstance(rule_config, dict):
			continue

		if not rule_config.get('enabled', True):
			print(f"Skipping rule {rule_name} (config['enabled'] == False)")
			continue

		if rule_name not in RULES_MAP:
			print(f"Unknown rule: {rule_name}")
			continue

		rule_class = RULES_MAP[rule_name]
		kwargs = rule_config.get('kwargs', {})

		try:
			rules.append(rule_class.create_from_config(kwargs))
		except (TypeError, ValueError, AttributeError) as e:
			print(f"Error creating rule {rule_name}: {e}")
			continue

	return rules


def load_whitelist(whitelist_path: str) -> Set[Path]:
	"""
	Load whitelisted spec file paths.

	One path per line; blank lines and lines starting with # are ignored.
	Relative paths are resolved against the current directory.
	"""
	path = Path(whitelist_path)
	if not path.exists():
		return set()

	try:
		lines = path.read_text(encoding='utf-8').splitlines()
	except (OSError, UnicodeDecodeError) as e:
		print(f"⚠️  Warning: Could not read whitelist {whitelist_path}: {e}")
		return set()

	whitelist = set()
	for line in lines:
		entry = line.strip()
		if not entry or entry.startswith('#'):
			continue
		whitelist.add(Path(entry).resolve())
	return whitelist


def generate_whitelist(patterns: List[str], output_file: str, append: bool = False, dry_run: bool = False) -> List[str]:
	"""
	Write the spec files matching the glob patterns to a whitelist file.

	Paths are written relative to the current directory, sorted and without duplicates.
	With append, entries already in the output file are kept.
	"""
	cwd = Path.cwd().resolve()
	entries = set()

	for pattern in patterns:
		for match in glob.glob(pattern, recursive=True):
			match_path = Path(match).resolve()
			if not match_path.is_file():
				continue
			try:
				entries.add(match_path.relative_to(cwd).as_posix())
			except ValueError:
				entries.add(match_path.as_posix())

	output_path = Path(output_file)
	if append and output_path.exists():
		for line in output_path.read_text(encoding='utf-8').splitlines():
			entry = line.strip()
			if entry and not entry.startswith('#'):
				entries.add(entry)

	sorted_entries = sorted(entries)

	if dry_run:
		print(f"🔍 Dry run: {len(sorted_entries)} paths would be written to {output_file}")
		for entry in sorted_entries:
			print(f"    {entry}")
		return sorted_entries

	output_path.parent.mkdir(parents=True, exist_ok=True)
	with open(output_path, 'w', encoding='utf-8') as f:
		f.write("# spec-path-lint whitelist: spec files excluded from checking\n")
		for entry in sorted_entries:
			f.write(f"{entry}\n")

	print(f"📝 Whitelist with {len(sorted_entries)} paths written to: {output_file}")
	return sorted_entries


def collect_files(args) -> List[Path]:
	"""Collect manifest files to process based on arguments."""
	files_to_process = []

	# If filenames are provided directly (e.g., from pre-commit), use them
	if args.filenames:
		for filename in args.filenames:
			file_path = Path(filename)
			if file_path.exists():
				files_to_process.append(file_path)
			else:
				print(f"Warning: File {filename} does not exist")

	# Otherwise, use glob patterns
	elif args.files:
		for file_pattern in args.files.split(","):
			pattern = file_pattern.strip()
			for file_path_str in sorted(glob.glob(pattern, recursive=True)):
				file_path = Path(file_path_str)
				if file_path.is_file():
					files_to_process.append(file_path)

	return files_to_process


def filter_whitelisted(spec_files: List[SpecFile], whitelist: Set[Path]) -> Tuple[List[SpecFile], List[SpecFile]]:
	"""Split spec files into (to check, whitelisted)."""
	if not whitelist:
		return spec_files, []

	kept = []
	ignored = []
	for spec_file in spec_files:
		if Path(spec_file.path).resolve() in whitelist:
			ignored.append(spec_file)
		else:
			kept.append(spec_file)
	return kept, ignored


def print_file_results(lint_results: LintResults) -> Tuple[int, int]:
	"""
	Print warnings and errors for a spec file and return the counts.

	Returns:
		tuple[int, int]: (warning_count, error_count)
	"""
	warning_count = sum(len(warning_list) for warning_list in lint_results.warnings.values())
	error_count = sum(len(error_list) for error_list in lint_results.errors.values())

	if warning_count > 0:
		print(f"\n⚠️  Found {warning_count} warnings:")
		for rule_name, warning_list in lint_results.warnings.items():
			print(f"\n  📋 {rule_name} (warning):")
			for warning in warning_list:
				print(f"    • {warning}")

	if error_count > 0:
		print(f"\n❌ Found {error_count} errors:")
		for rule_name, error_list in lint_results.errors.items():
			print(f"\n  📋 {rule_name} (error):")
			for error in error_list:
				print(f"    • {error}")

	return warning_count, error_count


def print_statistics(spec_file: SpecFile, stats: Dict[str, Any]):
	"""Print top-level group statistics for a spec file."""
	print(f"\n📊 Statistics for {spec_file.path}:")
	print(f"  Top-level calls: {stats['total_nodes']} ({stats['spec_group_count']} spec groups)")
	for method, count in stats['groups_by_method'].items():
		print(f"    {method}: {count}")
	for rule_name, coverage in stats['rule_coverage'].items():
		target_types = ', '.join(coverage['target_types'])
		print(f"  {rule_name}: {coverage['applicable_node_count']} nodes ({target_types})")


def setup_linter(args) -> LintEngine:
	"""Set up the linting engine with rules from configuration."""
	config = load_config(args.config)
	if not config:
		print("❌ No valid configuration found")
		sys.exit(1)

	print(f"🔧 Loaded configuration from {args.config}")
	rules = create_rules_from_config(config)
	if not rules:
		print("❌ No valid rules configured")
		sys.exit(1)

	if args.verbose:
		print(f"✅ Loaded {len(rules)} rules: {[rule.__class__.__name__ for rule in rules]}")

	return LintEngine(rules)


def process_spec_file(spec_file: SpecFile, lint_engine: LintEngine, args) -> Tuple[int, int, LintResults]:
	"""Lint a single spec file and return the warning and error counts plus lint results."""
	print(f"\n📄 Evaluating spec file:\n    {spec_file.path}")

	if args.verbose:
		print_statistics(spec_file, lint_engine.get_model_statistics(spec_file))

	lint_results = lint_engine.process(spec_file)

	if args.verbose:
		for rule_name, skipped_groups in lint_results.skipped.items():
			for group_path in skipped_groups:
				print(f"  ⏭️  {rule_name}: skipped routing spec {group_path}")

	file_warnings, file_errors = print_file_results(lint_results)
	if file_errors == 0 and file_warnings == 0:
		print("✅ No issues found")

	return file_warnings, file_errors, lint_results


def process_manifest(manifest_path: Path, args, whitelist: Set[Path]) -> Optional[List[SpecFile]]:
	"""Load the spec files of a manifest, dropping whitelisted ones. Returns None if the manifest is invalid."""
	try:
		spec_files = load_spec_files(manifest_path)
	except ManifestError as e:
		print(f"❌ Invalid spec manifest {manifest_path}: {e}")
		return None

	spec_files, ignored = filter_whitelisted(spec_files, whitelist)
	if ignored and args.verbose:
		print(f"⏭️  Skipped {len(ignored)} whitelisted spec files from {manifest_path}")
		for spec_file in ignored:
			print(f"    {spec_file.path}")
	return spec_files


def write_results_file(
	output_path: Path, results: List[Dict], total_warnings: int, total_errors: int, processed_files: int,
	files_with_issues: int
):
	"""Write linting results to an output file with detailed warnings and errors."""
	output_path.parent.mkdir(parents=True, exist_ok=True)

	with open(output_path, 'w', encoding='utf-8') as f:
		f.write("=" * 80 + "\n")
		f.write("SPEC-PATH-LINT RESULTS\n")
		f.write("=" * 80 + "\n\n")

		f.write("SUMMARY\n")
		f.write("-" * 80 + "\n")
		f.write(f"Spec files processed: {processed_files}\n")
		f.write(f"Total warnings:  {total_warnings}\n")
		f.write(f"Total errors:    {total_errors}\n")
		f.write(f"Files with issues: {files_with_issues}\n")
		f.write(f"Clean files:     {processed_files - files_with_issues}\n\n")

		f.write("PER-FILE RESULTS\n")
		f.write("=" * 80 + "\n\n")

		for result in results:
			status = "✅ CLEAN" if result['warnings'] == 0 and result['errors'] == 0 else "⚠️  ISSUES"
			f.write(f"{status} - {result['file']}\n")
			f.write("-" * 80 + "\n")

			lint_results = result['lint_results']
			for label, violations in (("WARNINGS", lint_results.warnings), ("ERRORS", lint_results.errors)):
				if not violations:
					continue
				count = sum(len(messages) for messages in violations.values())
				f.write(f"{label} ({count} total):\n\n")
				for rule_name, messages in violations.items():
					f.write(f"  📋 {rule_name}:\n")
					for message in messages:
						f.write(f"    • {message}\n")
					f.write("\n")

			f.write("\n")

		f.write("=" * 80 + "\n")
		f.write("END OF RESULTS\n")
		f.write("=" * 80 + "\n")


def print_final_summary(
	processed_files: int, total_warnings: int, total_errors: int, files_with_issues: int,
	ignore_warnings: bool = False, invalid_manifests: int = 0
):
	"""Print the final summary of the linting process and exit."""
	print("\n📈 Summary:")
	print(f"  Spec files processed: {processed_files}")

	if invalid_manifests:
		print(f"  ❌ Invalid manifests: {invalid_manifests}")

	total_issues = total_warnings + total_errors
	if total_issues == 0 and not invalid_manifests:
		print("  ✅ No spec path inconsistencies found!")
		sys.exit(0)

	if total_warnings > 0:
		print(f"  ⚠️  Total warnings: {total_warnings}")
	if total_errors > 0:
		print(f"  ❌ Total errors: {total_errors}")
	print(f"  📁 Files with issues: {files_with_issues}")
	print(f"  📁 Clean files: {processed_files - files_with_issues}")

	if ignore_warnings and total_errors == 0 and not invalid_manifests:
		print("  ✅ No errors found (ignoring warnings)")
		sys.exit(0)
	sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(description="Check that spec file paths match the subject they describe")
	parser.add_argument(
		"--version",
		action="version",
		version=f"%(prog)s {get_version()}",
	)
	parser.add_argument(
		"--config",
		default="rule_config.json",
		help="Path to configuration JSON file",
	)
	parser.add_argument(
		"--files",
		default=DEFAULT_MANIFEST_GLOB,
		help="Comma-separated list of spec manifest files or glob patterns",
	)
	parser.add_argument(
		"--verbose",
		"-v",
		action="store_true",
		help="Show detailed statistics and skipped spec files",
	)
	parser.add_argument(
		"--ignore-warnings",
		action="store_true",
		help="Don't fail on warnings, only on errors (warnings are still displayed)",
	)
	parser.add_argument(
		"--results-output",
		help="File path to write linting results (e.g., results.txt)",
	)
	parser.add_argument(
		"--whitelist",
		default=DEFAULT_WHITELIST_OUTPUT,
		help="File listing spec files to skip, one path per line (used when it exists)",
	)
	parser.add_argument(
		"--no-whitelist",
		action="store_true",
		help="Ignore the whitelist even if one is given",
	)
	parser.add_argument(
		"--generate-whitelist",
		nargs="+",
		metavar="PATTERN",
		help="Write the spec files matching these glob patterns to a whitelist and exit",
	)
	parser.add_argument(
		"--whitelist-output",
		default=DEFAULT_WHITELIST_OUTPUT,
		help="Whitelist file written by --generate-whitelist",
	)
	parser.add_argument(
		"--append",
		action="store_true",
		help="Keep existing entries when generating a whitelist",
	)
	parser.add_argument(
		"--dry-run",
		action="store_true",
		help="Print the generated whitelist instead of writing it",
	)
	parser.add_argument(
		"filenames",
		nargs="*",
		help="Spec manifest files to check (from pre-commit)",
	)
	return parser


def main():
	"""Main function to check spec file paths against their described subjects."""
	args = build_parser().parse_args()

	if args.generate_whitelist:
		generate_whitelist(args.generate_whitelist, args.whitelist_output, append=args.append, dry_run=args.dry_run)
		sys.exit(0)

	lint_engine = setup_linter(args)

	whitelist = set()
	if not args.no_whitelist:
		whitelist = load_whitelist(args.whitelist)
		if args.verbose:
			print(f"📋 Loaded {len(whitelist)} whitelisted spec files from {args.whitelist}")

	manifest_paths = collect_files(args)
	if not manifest_paths:
		print("❌ No spec manifests specified or found")
		sys.exit(0)

	if args.verbose:
		print(f"📁 Processing {len(manifest_paths)} manifests")

	total_warnings = 0
	total_errors = 0
	files_with_issues = 0
	processed_files = 0
	invalid_manifests = 0
	results_buffer = []

	for manifest_path in manifest_paths:
		spec_files = process_manifest(manifest_path, args, whitelist)
		if spec_files is None:
			invalid_manifests += 1
			continue

		for spec_file in spec_files:
			file_warnings, file_errors, lint_results = process_spec_file(spec_file, lint_engine, args)

			if args.results_output:
				results_buffer.append({
					'file': spec_file.path,
					'warnings': file_warnings,
					'errors': file_errors,
					'lint_results': lint_results
				})

			processed_files += 1
			total_warnings += file_warnings
			total_errors += file_errors
			if file_warnings > 0 or file_errors > 0:
				files_with_issues += 1

	if args.results_output:
		results_path = Path(args.results_output)
		write_results_file(
			results_path, results_buffer, total_warnings, total_errors, processed_files, files_with_issues
		)
		print("\n" + f"📝 Results written to: {results_path}")

	print_final_summary(
		processed_files, total_warnings, total_errors, files_with_issues, args.ignore_warnings, invalid_manifests
	)


if __name__ == "__main__":
	main()
