"""Spec file model: top-level group nodes, the manifest builder and subject extraction."""
