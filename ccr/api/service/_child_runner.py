"""Child process entry point for the service (invoked via subprocess)."""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> int:
    """Parse args and run the service until it is signalled."""
    from ...constants import SERVICE_LOG
    from ...utils.logger import configure_logging
    from ..config.CCRConfig import CCRConfig
    from .server import run_server

    parser = argparse.ArgumentParser(description="Claude Code Router service")
    parser.add_argument("--host", default=None)
    parser.add_argument("--port", type=int, default=None)
    args = parser.parse_args(argv)

    try:
        config = CCRConfig.load()
    except ValueError as exc:
        configure_logging(CCRConfig.get_home_dir(), log_name=SERVICE_LOG)
        logging.getLogger("ccr.service").error("Cannot start service: %s", exc)
        return 2
    configure_logging(CCRConfig.get_home_dir(), config.log.level, log_name=SERVICE_LOG)
    return run_server(config, host=args.host, port=args.port)


if __name__ == "__main__":
    sys.exit(main())
