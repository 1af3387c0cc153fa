"""
This module implements the linting engine for spec files described by a spec manifest.
It applies the configured linting rules to the top-level groups of each spec file, collects
errors and warnings per rule, and provides statistics about the groups it processed.
"""

from typing import Any, Dict, List, NamedTuple
from .rules.common import LintingRule
from .model.node_types import NodeType, NodeUtils, SpecFile


class LintResults(NamedTuple):
	"""Results from linting process."""
	warnings: Dict[str, List[str]]
	errors: Dict[str, List[str]]
	has_errors: bool
	skipped: Dict[str, List[str]]


class LintEngine:
	"""Applies linting rules to spec files."""

	def __init__(self, rules: List[LintingRule]):
		self.rules = rules

	def process(self, spec_file: SpecFile) -> LintResults:
		"""Lint the top-level groups of a spec file and return warnings and errors."""
		nodes = spec_file.top_level_groups

		warnings = {}
		errors = {}
		skipped = {}

		for rule in self.rules:
			rule.process_nodes(nodes)

			if rule.warnings:
				warnings[rule.error_key] = rule.warnings

			if rule.errors:
				errors[rule.error_key] = rule.errors

			# Rules may report groups they deliberately did not check (e.g. routing specs)
			if getattr(rule, 'skipped_groups', None):
				skipped[rule.error_key] = list(rule.skipped_groups)

		return LintResults(warnings=warnings, errors=errors, has_errors=bool(errors), skipped=skipped)

	def get_model_statistics(self, spec_file: SpecFile) -> Dict[str, Any]:
		"""Get statistics about the top-level groups of a spec file for debugging/analysis."""
		nodes = spec_file.top_level_groups

		node_type_counts = {}
		for node_type in NodeType:
			count = len(NodeUtils.filter_by_types(nodes, {node_type}))
			if count > 0:
				node_type_counts[node_type.value] = count

		groups_by_method = {}
		for node in nodes:
			groups_by_method[node.method] = groups_by_method.get(node.method, 0) + 1

		return {
			'total_nodes': len(nodes),
			'spec_group_count': len(NodeUtils.spec_groups(nodes)),
			'node_type_counts': node_type_counts,
			'groups_by_method': groups_by_method,
			'rule_coverage': self._get_rule_coverage_stats(nodes),
		}

	def _get_rule_coverage_stats(self, nodes: List) -> Dict[str, Any]:
		"""Get statistics about which nodes each rule would process."""
		coverage = {}
		for rule in self.rules:
			rule_name = rule.__class__.__name__

			if rule.target_node_types:
				applicable_nodes = NodeUtils.filter_by_types(nodes, rule.target_node_types)
				coverage[rule_name] = {
					'target_types': sorted([nt.value for nt in rule.target_node_types]),
					'applicable_node_count': len(applicable_nodes)
				}
			else:
				coverage[rule_name] = {'target_types': ['all'], 'applicable_node_count': len(nodes)}

		return coverage
