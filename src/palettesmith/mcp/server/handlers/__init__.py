"""MCP tool handlers. Each handler takes the raw argument dict and returns JSON text."""
