"""API module for CCR commands.

Functions defined here are the single source of truth for the CLI: each
``cmd_*`` returns a StageResult that the CLI layer announces, runs and displays.
"""

__all__ = []
