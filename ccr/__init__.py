"""Claude Code Router: supervise the background proxy and forward commands to it."""
