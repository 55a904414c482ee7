"""Command-line entry point: chrome-history-search."""

import logging
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from historysearch import __version__
from historysearch.contracts.models import FilterCriteria
from historysearch.core.errors import HistorySearchError
from historysearch.core.search import search_history
from historysearch.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
SQL_LOGGER_NAME = "sqlalchemy.engine"


def _configure_logging(settings: Settings, verbose: bool) -> None:
    # stderr keeps stdout for results only
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    if settings.debug:
        # SQL goes through the root handler, never SQLAlchemy's stdout echo
        logging.getLogger(SQL_LOGGER_NAME).setLevel(logging.INFO)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, prog_name="chrome-history-search")
@click.option("--start-date", default=None, help="Earliest last visit date (YYYY-MM-DD)")
@click.option("--end-date", default=None, help="Last visit before this date (YYYY-MM-DD)")
@click.option("-s", "--search", default=None, help="Text to search for in the page title")
@click.option("-u", "--url", default=None, help="Domain or text to search for in the URL")
@click.option("-l", "--limit", type=click.IntRange(min=1), default=None, help="Maximum number of results")
@click.option(
    "--history-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Chrome History database to read instead of the default location",
)
@click.option("--profile", default=None, help="Chrome profile directory name (default: Default)")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output to stderr")
def main(start_date, end_date, search, url, limit, history_file, profile, verbose):
    """Search Chrome browser history.

    Matching pages are printed newest first. Malformed dates are ignored.
    """
    overrides = {}
    if history_file is not None:
        overrides["history_path"] = history_file
    if profile is not None:
        overrides["profile"] = profile
    try:
        settings = Settings.model_validate({**get_settings().model_dump(), **overrides})
    except ValidationError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc
    _configure_logging(settings, verbose)

    criteria = FilterCriteria(
        start_date=start_date,
        end_date=end_date,
        search=search,
        url=url,
        limit=limit,
    )
    try:
        for row in search_history(criteria, settings):
            click.echo(row.render())
            click.echo()
    except HistorySearchError as exc:
        raise click.ClickException(str(exc)) from exc


if __name__ == "__main__":
    main()
