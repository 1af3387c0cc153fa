"""Derivation of expected spec file paths and matching against actual paths."""
