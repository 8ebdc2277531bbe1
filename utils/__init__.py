"""
Shared utilities for the Duct Sizer server: constants, numeric helpers,
JSON serialization and optional-dependency probes.
"""
