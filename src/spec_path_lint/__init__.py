"""
spec-path-lint: checks that spec file paths match the class and method they describe.
"""
