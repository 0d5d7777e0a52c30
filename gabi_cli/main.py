"""
Gabi CLI entry point.

Resolves kubeconfig credentials, finds the Gabi route in the namespace,
then runs the interactive query shell on stdin/stdout.

Usage:
    gabi
    gabi -n my-namespace
    gabi -kubeconfig ~/.kube/other-config --timeout 30
    gabi --debug
"""

import os
import sys
from typing import Any, NoReturn

import click

from gabi_cli import __version__
from gabi_cli.client import GabiClient
from gabi_cli.cluster import find_gabi_endpoint, load_credentials
from gabi_cli.core.config import Settings, load_settings
from gabi_cli.core.exceptions import ConsoleReadError, GabiError
from gabi_cli.core.logging import get_logger, setup_logging
from gabi_cli.session import Session
from gabi_cli.shell import InteractiveShell

logger = get_logger(__name__)


def default_kubeconfig() -> str | None:
    """~/.kube/config when a home directory exists."""
    home = os.path.expanduser("~")
    if home == "~":
        return None
    return os.path.join(home, ".kube", "config")


def _show_help_and_fail(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    """-h prints usage to stderr and exits non-zero."""
    if not value or ctx.resilient_parsing:
        return
    click.echo(ctx.get_help(), err=True)
    ctx.exit(1)


def _fatal(error: Exception) -> NoReturn:
    """Log a fatal error and exit."""
    message = error.message if isinstance(error, GabiError) else str(error)
    logger.critical(message, code=getattr(error, "code", None))
    sys.exit(1)


def apply_overrides(settings: Settings, **overrides: Any) -> Settings:
    """Return settings with every non-None CLI override applied."""
    update = {key: value for key, value in overrides.items() if value is not None}
    return settings.model_copy(update=update) if update else settings


@click.command(context_settings={"help_option_names": ["--help"]})
@click.option(
    "-kubeconfig", "--kubeconfig", "kubeconfig",
    default=default_kubeconfig,
    envvar="KUBECONFIG",
    help="(optional) absolute path to the kubeconfig file",
)
@click.option("-n", "--namespace", default=None, help="Namespace (defaults to current context)")
@click.option("--context", default=None, help="Kubeconfig context (defaults to current context)")
@click.option("--config", "config_path", default=None, help="Settings file (defaults to ~/.config/gabi-cli/settings.yaml).")
@click.option("--timeout", type=click.FloatRange(min=0, min_open=True), default=None, help="Query timeout in seconds (default: none).")
@click.option("--insecure-skip-tls-verify", "insecure", is_flag=True, default=False, help="Do not verify the Gabi TLS certificate.")
@click.option("-q", "--quiet", is_flag=True, help="Only log warnings and errors.")
@click.option("-d", "--debug", is_flag=True, help="Enable debug output (DEBUG level logging).")
@click.option(
    "-h", "show_help",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_show_help_and_fail,
    help="Shows help",
)
@click.version_option(__version__, "--version")
def main(
    kubeconfig: str | None,
    namespace: str | None,
    context: str | None,
    config_path: str | None,
    timeout: float | None,
    insecure: bool,
    quiet: bool,
    debug: bool,
) -> None:
    """
    Interactive query shell for Gabi.

    Queries end with ';'. Press Ctrl-D to exit.
    """
    try:
        settings = load_settings(config_path)
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    log_level = "DEBUG" if debug else "WARNING" if quiet else None
    settings = apply_overrides(
        settings,
        timeout=timeout,
        verify_tls=False if insecure else None,
        log_level=log_level,
        log_format="console" if debug else None,
    )
    setup_logging(
        level=settings.log_level,
        format_type=settings.log_format,
        log_file=settings.log_file,
    )

    try:
        credentials = load_credentials(kubeconfig=kubeconfig, namespace=namespace, context=context)
    except GabiError as e:
        _fatal(e)

    logger.info("Looking up Gabi", namespace=credentials.namespace, cluster=credentials.host)
    try:
        endpoint = find_gabi_endpoint(
            credentials.api_client,
            credentials.namespace,
            prefix=settings.route_prefix,
        )
    except GabiError as e:
        _fatal(e)
    finally:
        credentials.api_client.close()

    logger.info("Using Gabi", url=endpoint.url)
    session = Session.from_cluster(credentials, endpoint)

    with GabiClient.for_session(
        session,
        query_path=settings.query_path,
        timeout=settings.timeout,
        verify=settings.verify_tls,
    ) as client:
        shell = InteractiveShell(
            client,
            sys.stdin,
            sys.stdout,
            sys.stderr,
            prompt=settings.prompt,
            delimiter=settings.delimiter,
        )
        try:
            shell.run()
        except ConsoleReadError as e:
            _fatal(e)


if __name__ == "__main__":
    main()
