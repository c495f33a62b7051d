import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from frontline.adapters.sources import ArgvSource, EnvironSource
from frontline.components.dispatch import (
    Dispatcher,
    DispatchStatus,
    HandleRequestInput,
)
from frontline.components.dispatch import run as run_dispatch
from frontline.components.params import ParameterSources
from frontline.config import Configuration
from frontline.core.errors import ConfigurationError, RequestNotFoundError

logger = logging.getLogger("cli")

CONFIG_PATH = "commands.yaml"

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_NOT_FOUND = 2


def get_configuration(path: Path) -> Configuration:
    if not path.exists():
        raise FileNotFoundError(f"Commands file {path} not found.")
    return Configuration.from_path(path)


def handle_explain(configuration: Configuration, request_name: str) -> int:
    try:
        print(configuration.explain(request_name))
    except RequestNotFoundError as e:
        logger.error(str(e))
        return EXIT_NOT_FOUND
    except ConfigurationError as e:
        logger.error(str(e))
        return EXIT_CONFIG_ERROR
    return EXIT_OK


def handle_dispatch(
    configuration: Configuration, request_name: str, args: Sequence[str]
) -> int:
    dispatcher = Dispatcher.from_config(
        configuration,
        initial_config={"base_dir": str(Path.cwd())},
    )
    sources = ParameterSources(argv=ArgvSource(args), env=EnvironSource())
    result = run_dispatch(
        HandleRequestInput(request_name=request_name, sources=sources),
        dispatcher=dispatcher,
    )

    sys.stdout.write(result.body)

    if result.status is DispatchStatus.NOT_FOUND:
        logger.error(result.error)
        return EXIT_NOT_FOUND
    if result.status is DispatchStatus.CONFIG_ERROR:
        logger.error(result.error)
        return EXIT_CONFIG_ERROR
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Frontline request dispatcher")
    parser.add_argument("request", help="Name of the request to run")
    parser.add_argument("args", nargs="*", help="Positional values, read with argv:N")
    parser.add_argument("--config", default=CONFIG_PATH, help="Path to the commands file")
    parser.add_argument(
        "--explain", action="store_true", help="Describe the request instead of running it"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)

    try:
        configuration = get_configuration(Path(args.config))
    except (FileNotFoundError, ConfigurationError) as e:
        logger.error(str(e))
        return EXIT_CONFIG_ERROR

    if args.explain:
        return handle_explain(configuration, args.request)
    return handle_dispatch(configuration, args.request, args.args)


if __name__ == "__main__":
    sys.exit(main())
