"""Consolidated MCP tools returning JSON strings."""
