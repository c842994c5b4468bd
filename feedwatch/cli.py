"""
Command-line interface for feedwatch.
"""

import dataclasses
import json
import logging
from pathlib import Path
from typing import Optional

import click

from .config.constants import DEFAULT_CONFIG_PATH, DEFAULT_LOG_FILE, VALID_CRAWL_MODES
from .config.settings import Config
from .crawlers import FetchError
from .main import run_agent
from .parsers import FeedParseError, parse_feed
from .parsers.rss import ParseAnomaly
from .utils.helpers import format_timestamp

logger = logging.getLogger(__name__)


def _setup_logging(config: Optional[Config] = None, verbose: bool = False) -> None:
    """
    Setup logging configuration based on config or CLI options.

    Args:
        config: Optional Config object with log_level setting
        verbose: If True, override log level to DEBUG
    """
    if verbose:
        log_level = logging.DEBUG
    elif config and config.log_level:
        log_level = getattr(logging, config.log_level.upper(), logging.INFO)
    else:
        log_level = logging.INFO

    log_file = DEFAULT_LOG_FILE
    if config and config.log_file:
        log_file = config.log_file

    Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(log_file),
        ],
    )


def _load_config(config: Optional[str]) -> Config:
    try:
        return Config.from_file(config) if config else Config()
    except (TypeError, ValueError) as e:
        raise click.ClickException(f"Invalid configuration: {e}")


@click.group()
@click.version_option(version="0.1.0", prog_name="feedwatch")
def main():
    """feedwatch - RSS feed and headline page watcher.

    Crawl Modes:
      rss        Parse the target as an RSS feed
      html       Scrape the target as an LWN.net headlines page
      auto       rss when the URL looks like a feed, html otherwise

    Commands:
      crawl      Fetch, parse and notify for the target URL
      parse      Parse a local RSS file and print its items
      init       Write a default configuration file
      info       Display current configuration
    """
    pass


@main.command()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True),
    help="Path to configuration file",
)
@click.option(
    "--target",
    "-t",
    type=str,
    help="Target URL to crawl",
)
@click.option(
    "--mode",
    "-m",
    type=click.Choice(VALID_CRAWL_MODES),
    default=None,
    help="Crawling mode (defaults to the configured one)",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail when recognized feed elements are left unclosed",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose logging",
)
def crawl(config: Optional[str], target: Optional[str], mode: Optional[str], strict: bool, verbose: bool):
    """Fetch the target URL, parse it and notify for each record."""
    cfg = _load_config(config)

    # Override with CLI options; replace() re-runs validation
    overrides = {}
    if target:
        overrides["target_url"] = target
    if mode:
        overrides["crawl_mode"] = mode
    if strict:
        overrides["strict_parsing"] = True
    try:
        cfg = dataclasses.replace(cfg, **overrides)
    except ValueError as e:
        raise click.ClickException(f"Invalid configuration: {e}")

    _setup_logging(cfg, verbose)

    logger.info(f"Starting crawl in {cfg.crawl_mode} mode")
    logger.info(f"Target: {cfg.target_url}")

    try:
        records = run_agent(cfg)
    except (FetchError, FeedParseError) as e:
        raise click.ClickException(str(e))

    logger.info(f"Crawl completed successfully: {len(records)} records")


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--strict",
    is_flag=True,
    help="Fail when recognized feed elements are left unclosed",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
def parse(path: str, strict: bool, output_format: str):
    """Parse a local RSS file and print its items."""

    def warn(anomaly: ParseAnomaly) -> None:
        where = f" (line {anomaly.position.row})" if anomaly.position else ""
        click.echo(f"warning: {anomaly.message}{where}", err=True)

    document = Path(path).read_bytes()
    try:
        items = parse_feed(document, strict=strict, on_anomaly=warn)
    except FeedParseError as e:
        raise click.ClickException(f"{path}: {e}")

    if output_format == "json":
        click.echo(json.dumps([item.to_dict() for item in items], indent=2, ensure_ascii=False))
        return

    for i, item in enumerate(items, 1):
        click.echo(f"{i}. {item.title}")
        click.echo(f"   Link: {item.link}")
        click.echo(f"   Time: {format_timestamp(item.created)}")
        if item.author:
            click.echo(f"   Author: {item.author}")
        if item.description:
            click.echo(f"   {item.description}")
    click.echo(f"{len(items)} items")


@main.command()
@click.option(
    "--config",
    "-c",
    type=click.Path(dir_okay=False),
    help=f"Where to write the configuration (default: {DEFAULT_CONFIG_PATH})",
)
def init(config: Optional[str]):
    """Initialize feedwatch configuration and directories."""
    cfg = Config()

    Path(cfg.log_file).parent.mkdir(parents=True, exist_ok=True)

    config_path = Path(config) if config else Path(DEFAULT_CONFIG_PATH)
    cfg.save_to_file(config_path)

    click.echo(f"Configuration initialized at: {config_path}")


@main.command()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True),
    help="Path to configuration file",
)
def info(config: Optional[str]):
    """Display current configuration."""
    cfg = _load_config(config)

    click.echo("feedwatch Configuration:")
    click.echo(f"  Target URL: {cfg.target_url}")
    click.echo(f"  Crawl Mode: {cfg.crawl_mode}")
    click.echo(f"  Timeout: {cfg.timeout}s")
    click.echo(f"  Max Retries: {cfg.max_retries}")
    click.echo(f"  Strict Parsing: {cfg.strict_parsing}")
    click.echo(f"  Notify: log={cfg.notify_log} console={cfg.notify_console}")
    click.echo(f"  Log Level: {cfg.log_level}")


if __name__ == "__main__":
    main()
