# =============================================================================
# agent/__init__.py
# =============================================================================
# The model-facing side of the chat client.
#
#   settings.py  → environment / .env configuration
#   prompt.py    → the system prompt every conversation starts with
#   resolver.py  → QueryResolver: one query in, one answer out, calling at
#                  most one MCP tool on the way
#
# Nothing here knows how the weather tools work; it only sees their names,
# descriptions and schemas as listed by the MCP server.
# =============================================================================
