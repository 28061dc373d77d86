"""
Shared utilities for componentry.

Common functionality used across contexts:
- Naming conventions (CamelCase to snake_case)
- Logger configuration
"""
