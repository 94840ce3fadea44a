# =============================================================================
# core/__init__.py
# =============================================================================
# Data models and weather logic.
#
# Nothing in this package imports FastMCP or LiteLLM.  core/nws.py is the
# only module that touches the network (via httpx).
# =============================================================================
