import asyncio
import json
import os
import sys

import click
from dotenv import load_dotenv

__version__ = "0.3.0"

from .logging_config import log_operation, setup_logger
from .utils.env import is_env_truthy

# Installs ContextualLogger as the logger class before any component logger exists
logger = setup_logger()


def _print_result(result) -> None:
    """Echo a command result: the message, then the data as JSON."""
    prefix = "" if result.success else "✗ "
    click.echo(f"{prefix}{result.message}")
    if result.data is not None:
        click.echo(json.dumps(result.data, indent=2, ensure_ascii=False, default=str))


def _build_fetcher():
    from .backlog import BacklogFetcher
    from .backlog.config import BacklogConfig, relay_url_from_env

    config = BacklogConfig.from_env()
    if config is None:
        logger.warning(
            "BACKLOG_API_KEY or BACKLOG_SPACE_ID is not set; commands will not run"
        )
    return BacklogFetcher(config, relay_url=relay_url_from_env())


def _build_assistant():
    from .commands import CommandDispatcher
    from .intent import Assistant, IntentParser

    fetcher = _build_fetcher()
    return fetcher, Assistant(IntentParser.from_env(), CommandDispatcher(fetcher))


@click.group()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--log-dir",
    help="Directory to store log files",
)
@click.option(
    "--log-to-file/--no-log-to-file",
    default=None,
    help="Enable/disable file logging (default: LOG_TO_FILE)",
)
def main(
    verbose: int,
    env_file: str | None,
    log_dir: str | None,
    log_to_file: bool | None,
) -> None:
    """Backlog Assistant - natural-language commands for the Backlog API."""
    # Load environment variables from file if specified, otherwise try default .env
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    logging_level = "WARNING"
    if verbose == 1:
        logging_level = "INFO"
    elif verbose >= 2:
        logging_level = "DEBUG"

    if log_to_file is None:
        log_to_file = is_env_truthy("LOG_TO_FILE")

    setup_logger(
        name="backlog-assistant",
        level=logging_level if verbose else os.getenv("LOG_LEVEL", logging_level),
        log_to_file=log_to_file,
        log_dir=log_dir,
    )


@main.command()
@click.option("--host", help="Interface to bind (default: GATEWAY_HOST or 127.0.0.1)")
@click.option("--port", type=int, help="Port to listen on (default: GATEWAY_PORT or 3001)")
@click.option(
    "--upstream",
    "upstreams",
    multiple=True,
    help="Upstream base URL, in fallback order (repeatable)",
)
def gateway(host: str | None, port: int | None, upstreams: tuple[str, ...]) -> None:
    """Run the forwarding gateway in front of the Backlog mirrors."""
    from .gateway import GatewayConfig, run_gateway

    if upstreams:
        os.environ["GATEWAY_UPSTREAM_URLS"] = ",".join(upstreams)
    try:
        config = GatewayConfig.from_env()
    except ValueError as e:
        raise click.UsageError(str(e)) from e
    if host:
        config.host = host
    if port:
        config.port = port

    with log_operation(logger, "gateway_startup", app_version=__version__):
        logger.info(f"Starting Backlog gateway v{__version__} on {config.host}:{config.port}")
    asyncio.run(run_gateway(config))


@main.command()
@click.argument("message")
def run(message: str) -> None:
    """Run a single natural-language command."""

    async def _run() -> bool:
        fetcher, assistant = _build_assistant()
        try:
            result = await assistant.handle(message)
        finally:
            await fetcher.aclose()
        _print_result(result)
        return result.success

    if not asyncio.run(_run()):
        sys.exit(1)


@main.command()
@click.argument("entity_type")
@click.argument("action")
@click.argument("params", nargs=-1)
def dispatch(entity_type: str, action: str, params: tuple[str, ...]) -> None:
    """Run a structured command directly, e.g. `issues get issueIdOrKey=TEST-1`."""
    from .commands import CommandDispatcher, Intent

    parsed: dict[str, str] = {}
    for item in params:
        key, sep, value = item.partition("=")
        if not sep:
            raise click.BadParameter(f"expected key=value, got '{item}'")
        parsed[key] = value

    intent = Intent(
        type=entity_type,
        action=action,
        params=parsed,
        rawCommand=" ".join([entity_type, action, *params]),
    )

    async def _dispatch() -> bool:
        fetcher = _build_fetcher()
        try:
            result = await CommandDispatcher(fetcher).dispatch(intent)
        finally:
            await fetcher.aclose()
        _print_result(result)
        return result.success

    if not asyncio.run(_dispatch()):
        sys.exit(1)


@main.command()
def chat() -> None:
    """Interactive prompt; type 'exit' or press Ctrl-D to leave."""

    async def _chat() -> None:
        fetcher, assistant = _build_assistant()
        try:
            while True:
                try:
                    message = await asyncio.to_thread(input, "> ")
                except EOFError:
                    break
                message = message.strip()
                if not message:
                    continue
                if message.lower() in ("exit", "quit"):
                    break
                _print_result(await assistant.handle(message))
        finally:
            await fetcher.aclose()

    asyncio.run(_chat())


__all__ = ["main", "__version__", "setup_logger", "log_operation"]

if __name__ == "__main__":
    main()
