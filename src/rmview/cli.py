"""
CLI entry point for rmview.

Created: 2026-10-19
"""

import sys
import click
from pathlib import Path
from rmview import __version__
from rmview.config import Settings, setup_logging
from rmview.core.exceptions import ConfigurationError, ListingError


@click.command()
@click.version_option(version=__version__)
def cli():
    """Browse the current directory and delete files or directories.

    Type to filter by name prefix, Tab toggles the filter box, Enter
    deletes the highlighted entry, Ctrl+C exits.
    """
    try:
        settings = Settings.load()
        setup_logging(settings.logging)
    except (ConfigurationError, ValueError) as e:
        click.echo(f"✗ Configuration error: {e}", err=True)
        sys.exit(1)

    try:
        directory = Path.cwd()
    except OSError as e:
        click.echo(str(ListingError(Path("."), e)), err=True)
        sys.exit(1)

    from rmview.tui.app import run_app

    app = run_app(directory, settings=settings)
    if app.listing_error:
        click.echo(str(app.listing_error), err=True)
        sys.exit(1)
    sys.exit(app.return_code or 0)


def main():
    cli()


if __name__ == "__main__":
    main()
