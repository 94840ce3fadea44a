# =============================================================================
# agent/prompt.py  —  The Assistant's System Prompt
# =============================================================================
#
# Every query starts a fresh two-message conversation: this prompt, then the
# user's text.  The prompt stays short on purpose: the tool descriptions
# sent alongside it already tell the model what the weather tools do.
# =============================================================================

SYSTEM_PROMPT = "You are a helpful assistant."
