import argparse
from datetime import datetime
import logging
import sys

from stride_core import ConfigurationError
from stride_ui.Init import Init
from stride_ui.AppState import AppState


def main() -> None:
    parser = argparse.ArgumentParser(description="Movement controller sandbox")
    parser.add_argument(
        "--log",
        default="ERROR",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default is ERROR."
    )
    parser.add_argument(
        "--log-to-file",
        action="store_true",
        help="Save logs to txt file."
    )
    parser.add_argument(
        "--settings",
        default="settings.toml",
        help="Path to the settings file, created with defaults if missing."
    )

    args, unknown = parser.parse_known_args()

    level_name = args.log.upper()
    level = getattr(logging, level_name, None)

    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {args.log}")

    log_format = "%(asctime)s - %(levelname)s - %(message)s"
    handlers = [logging.StreamHandler()]

    if args.log_to_file:
        timestamp = datetime.now().strftime("%Y-%m-%d_%H:%M:%S")
        log_filename = f"{timestamp}.txt"
        handlers.append(logging.FileHandler(log_filename))

    logging.basicConfig(
        level=level,
        format=log_format,
        handlers=handlers
    )

    try:
        # Load settings from file, otherwise use default values if file not available
        settings = Init.settings(args.settings)
        state = AppState(settings)
    except ConfigurationError as e:
        logging.error(f"Invalid configuration in {args.settings}: {e}")
        sys.exit(1)
    except ValueError as e:
        # Unknown key names and malformed TOML
        logging.error(f"Could not load settings from {args.settings}: {e}")
        sys.exit(1)

    while state.running:
        if not state.handle_events():
            break

        state.update()
        state.render()

        state.tick()

    state.shutdown()


if __name__ == "__main__":
    main()
