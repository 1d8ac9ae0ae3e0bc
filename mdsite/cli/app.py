"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from typing_extensions import Annotated

from ..build import build_site
from ..core.errors import SiteError
from ..core.settings import get_settings, resolve_config
from ..server import SiteServer
from .parsers import parse_port

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="mdsite",
    help="Static site generator: render markdown files through a Jinja2 template.",
    add_completion=False,
)


@app.command()
def build(
    ctx: typer.Context,
    input_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--input",
            "-i",
            help="Sets the directory containing md files [default: content]",
            metavar="DIR",
        ),
    ] = None,
    template_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--templates",
            "-t",
            help="Sets the directory containing templates [default: templates]",
            metavar="DIR",
        ),
    ] = None,
    out_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Sets the directory to output HTML files [default: public]",
            metavar="DIR",
        ),
    ] = None,
    template_name: Annotated[
        Optional[str],
        typer.Option(
            "--template",
            "-H",
            help="Sets the HTML template to use [default: base.html]",
            metavar="FILE",
        ),
    ] = None,
    serve: Annotated[
        bool,
        typer.Option(
            "--serve",
            "-s",
            help="Serve the generated website",
        ),
    ] = False,
    port: Annotated[
        Optional[str],
        typer.Option(
            "--port",
            "-p",
            help="Sets the port to serve the website on [default: 8080]",
            metavar="PORT",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Render markdown files to HTML pages and optionally serve them."""
    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    logger.debug("Starting mdsite")

    try:
        settings = get_settings()
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        raise typer.Exit(code=2) from e

    # The port only matters when serving
    port_number = None
    if port is not None and (serve or settings.serve):
        port_number = parse_port(port)

    try:
        config = resolve_config(
            settings,
            input_dir=input_dir,
            template_dir=template_dir,
            out_dir=out_dir,
            template_name=template_name,
            serve=serve,
            port=port_number,
            verbose=verbose,
        )
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        raise typer.Exit(code=2) from e

    logger.debug(f"Config: {config}")

    try:
        report = build_site(config)
    except SiteError as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from e

    if report.found == 0:
        typer.echo(f"No markdown files found in '{config.input_dir}' directory.")
        typer.echo(ctx.get_help())
        return

    if config.serve:
        server = SiteServer(config.out_dir, config.port)
        try:
            server.run()
        except SiteError as e:
            logger.error(str(e))
            raise typer.Exit(code=1) from e


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
