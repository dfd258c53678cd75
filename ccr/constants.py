"""Shared constants for CCR dot-directories and artefact locations."""

CCR_HOME_EXT = ".claude-code-router"  # user-level state/config directory suffix

PID_FILENAME = ".claude-code-router.pid"

REFERENCE_COUNT_FILENAME = "claude-code-reference-count.txt"

DEFAULT_HOST = "127.0.0.1"

DEFAULT_PORT = 3456

# Readiness polling (milliseconds)
POLL_INTERVAL_MS = 100
SETTLE_DELAY_MS = 500

SERVICE_LOG = "logs/service.log"  # relative to the CCR home directory
