"""
Shared utilities for VITAE.

Common functionality used across contexts:
- Logging setup and provenance
"""
