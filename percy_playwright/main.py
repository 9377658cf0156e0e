import json
import logging
import sys

import click

from percy_playwright.client.healthcheck import healthcheck as run_healthcheck
from percy_playwright.client.transport import Transport
from percy_playwright.shared.region import build_region
from percy_playwright.utils.config import PercyConfig
from percy_playwright.utils.log import configure_logging

logger = logging.getLogger("percy_playwright.cli")


def _load_config(config_path, server_address=None) -> PercyConfig:
    config = PercyConfig.load(config_path)
    if server_address:
        config.server_address = server_address
    configure_logging(config.debug)
    return config


@click.group()
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, dir_okay=False), help="YAML config file")
@click.option("--server-address", default=None, help="Percy CLI address (overrides PERCY_SERVER_ADDRESS)")
@click.pass_context
def cli(ctx, config_path, server_address):
    """Percy Playwright - probe the Percy CLI and take snapshots."""
    ctx.obj = _load_config(config_path, server_address)


@cli.command()
@click.pass_obj
def healthcheck(config):
    """Check whether the local Percy CLI is running and compatible."""
    transport = Transport(config.server_address, timeout=config.request_timeout, debug=config.debug)
    capabilities = run_healthcheck(transport, debug=config.debug)

    click.echo(f"Percy CLI: {config.server_address}")
    click.echo(f"Enabled: {str(capabilities.enabled).lower()}")
    click.echo(f"Core version: {capabilities.core_version or 'unknown'}")
    click.echo(f"Session type: {capabilities.session_type.value}")
    if not capabilities.enabled:
        sys.exit(1)


@cli.command()
@click.option("--url", required=True, help="Page to snapshot")
@click.option("--name", required=True, help="Snapshot name")
@click.option("--width", "widths", multiple=True, type=int, help="Width to render at (repeatable)")
@click.option("--min-height", default=None, type=int, help="Minimum snapshot height in pixels")
@click.option("--percy-css", default=None, help="CSS applied only in Percy's browsers")
@click.option("--scope", default=None, help="CSS selector to scope the snapshot to")
@click.option("--enable-javascript/--no-enable-javascript", default=None, help="Run JavaScript when rendering")
@click.option("--browser", "browser_type", default="chromium", type=click.Choice(["chromium", "firefox", "webkit"]), help="Browser to drive")
@click.option("--headless/--no-headless", default=True, help="Run in headless mode")
@click.pass_obj
def snapshot(config, url, name, widths, min_height, percy_css, scope, enable_javascript, browser_type, headless):
    """Open URL in a local browser and upload a DOM snapshot."""
    from percy_playwright.browser_interaction.session_manager import SessionManager
    from percy_playwright.client.percy import Percy

    logger.info(f"Snapshotting '{name}' at {url}")
    with SessionManager(headless=headless, browser_type=browser_type) as session:
        session.navigate(url)
        percy = Percy(session.page, config=config)
        if not percy.enabled:
            logger.warning("Percy is disabled, nothing was uploaded.")
            sys.exit(1)
        data = percy.snapshot(
            name,
            widths=list(widths) or None,
            min_height=min_height,
            percy_css=percy_css,
            scope=scope,
            enable_javascript=enable_javascript,
        )

    click.echo(json.dumps(data, indent=2))


@cli.command()
@click.argument("params_json")
def region(params_json):
    """Print the region built from a JSON object of region options."""
    try:
        params = json.loads(params_json)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param_hint="PARAMS_JSON")
    if not isinstance(params, dict):
        raise click.BadParameter("expected a JSON object", param_hint="PARAMS_JSON")
    click.echo(json.dumps(build_region(params), indent=2, sort_keys=True))


if __name__ == "__main__":
    cli()
