"""
Command-line entrypoint for the calculator microservice.

This script:
- Reads configuration from CLI arguments and ``CALCULATOR_*`` variables
- Builds the HTTP application and its logger
- Serves it with uvicorn until interrupted
"""

import argparse
from typing import List, Optional

from pydantic import ValidationError
import uvicorn

from calculator_microservice.common.settings import Settings
from calculator_microservice.server.app import create_app


def parse_args(argv: Optional[List[str]] = None) -> Settings:
    """
    Parse and validate command-line arguments.

    Options left unset fall back to the environment, then to defaults.

    :param argv: Argument list, ``sys.argv[1:]`` if omitted

    :return: Validated settings
    :rtype: Settings
    """
    parser = argparse.ArgumentParser(description="Calculator microservice")
    parser.add_argument("--host", help="Interface to bind (default: 0.0.0.0)")
    parser.add_argument("--port", help="Port to listen on (default: 3000)")
    parser.add_argument("--log-dir", dest="log_dir", help="Directory for error.log and combined.log")
    parser.add_argument("--log-level", dest="log_level", help="Minimum log level (default: INFO)")

    args = parser.parse_args(argv)

    try:
        defaults = Settings.from_env().model_dump()
        overrides = {key: value for key, value in vars(args).items() if value is not None}
        return Settings(**{**defaults, **overrides})
    except ValidationError as exc:
        parser.error(str(exc))


def main(argv: Optional[List[str]] = None) -> None:
    """
    Start the HTTP server.
    """
    settings = parse_args(argv)
    app = create_app(settings)

    app.state.logger.info(f"🖥️ Calculator service running at http://{settings.host}:{settings.port}")
    uvicorn.run(app, host=str(settings.host), port=settings.port)


if __name__ == "__main__":
    main()
