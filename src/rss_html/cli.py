"""CLI interface for rss-html using Typer."""

from pathlib import Path
from typing import Optional

import typer
import yaml
from typing_extensions import Annotated

from . import __version__
from .main import RSSHtmlApp
from .utils.paths import get_log_dir, get_project_dir


SOURCE_PROMPT = "Enter the URL of an RSS feed"
OUTPUT_PROMPT = "Enter the name of the output file (including .html extension)"

app = typer.Typer(
    name="rss-html",
    help="Convert an RSS 2.0 feed into a static HTML page",
    add_completion=False,
)


@app.command()
def convert(
    source: Annotated[Optional[str], typer.Argument(help="Feed URL or local file path")] = None,
    output: Annotated[Optional[str], typer.Option("--output", "-o", help="Output HTML file")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show detailed output")] = False,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file")] = None,
) -> None:
    """Convert an RSS 2.0 feed into an HTML page."""
    if source is None:
        source = typer.prompt(SOURCE_PROMPT)

    try:
        app_instance = RSSHtmlApp(config_file)
        if verbose:
            app_instance.set_verbose()
        result = app_instance.convert(
            source,
            output=output,
            prompt_output=lambda: typer.prompt(OUTPUT_PROMPT),
        )
    except Exception as e:
        typer.echo(f"✗ Error: {e}", err=True)
        raise typer.Exit(1)

    if result.converted:
        typer.echo(f"✓ {result.message}")
    else:
        typer.echo(result.message)


@app.command()
def config(
    show: Annotated[bool, typer.Option("--show", help="Show current config")] = False,
    example: Annotated[bool, typer.Option("--example", help="Generate example config")] = False,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file")] = None,
) -> None:
    """Manage rss-html configuration."""
    if example:
        from .config import create_example_config
        typer.echo(create_example_config())
    elif show:
        try:
            from .config import load_config
            config_obj = load_config(config_file)
            typer.echo(yaml.dump(config_obj.model_dump(), default_flow_style=False, indent=2))
        except Exception as e:
            typer.echo(f"✗ Error loading config: {e}", err=True)
            raise typer.Exit(1)
    else:
        typer.echo("Use --show to view config or --example to generate example")


@app.command()
def info(
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file")] = None,
) -> None:
    """Show version and project information."""
    typer.echo(f"rss-html v{__version__}")
    typer.echo(f"Project Directory: {get_project_dir()}")
    typer.echo(f"Log Directory: {get_log_dir()}")

    try:
        app_instance = RSSHtmlApp(config_file)
        info_data = app_instance.get_info()
        typer.echo(f"\nApplication Info:")
        typer.echo(f"  Config file: {info_data.get('config_file', 'N/A')}")
        typer.echo(f"  Log level: {info_data.get('log_level', 'N/A')}")
        typer.echo(f"  Timeout: {info_data.get('timeout', 'N/A')} seconds")
        typer.echo(f"  Retry attempts: {info_data.get('retry_attempts', 'N/A')}")
        typer.echo(f"  Output directory: {info_data.get('output_dir') or 'current directory'}")
        typer.echo(f"  Wrap missing date: {info_data.get('wrap_missing_date', False)}")
    except Exception as e:
        typer.echo(f"Warning: Could not load application info: {e}")


if __name__ == "__main__":
    app()
