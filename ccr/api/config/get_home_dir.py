"""Get CCR home directory path or path under it."""

import os
from pathlib import Path

from ...constants import CCR_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get CCR home directory path or path under it.

    Checks the CCR_HOME environment variable first, defaults to
    ~/.claude-code-router if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json", "logs")

    Returns:
        Absolute path to CCR home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.claude-code-router")
        >>> get_home_dir("config.json")
        Path("/Users/user/.claude-code-router/config.json")
    """
    ccr_home_env = os.environ.get("CCR_HOME")
    if ccr_home_env:
        ccr_home = Path(ccr_home_env).expanduser().resolve()
    else:
        # Check HOME environment variable (for test isolation)
        home_env = os.environ.get("HOME")
        if home_env:
            ccr_home = Path(home_env) / CCR_HOME_EXT
        else:
            ccr_home = Path.home() / CCR_HOME_EXT

    return ccr_home / Path(*parts) if parts else ccr_home
