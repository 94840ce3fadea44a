# =============================================================================
# tools/__init__.py
# =============================================================================
# FastMCP tool wrappers.
#
# tools/mcp_server.py declares each tool's name, description and argument
# schema, logs the call, and delegates the work to core/weather.py.  The
# tool descriptions are what the LLM reads when deciding whether to call a
# tool, so they are kept short and literal.
# =============================================================================
