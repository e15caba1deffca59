import json
import logging
from pathlib import Path

import typer

from .config import find_config, load_config
from .errors import ConfigError
from .models import FormatConfig
from .project import PROJECT_CONFIG
from .resolver import resolve_options

app = typer.Typer(help="formatrc - Inspect and resolve formatter configuration")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    """Inspect and resolve formatter configuration"""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _load_or_exit(path: Path) -> FormatConfig:
    try:
        return load_config(path)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _config_for(file_path: Path, config_file: Path | None) -> tuple[FormatConfig, Path]:
    """Config governing ``file_path`` and the directory its path patterns are relative to"""
    config_path = config_file or find_config(file_path)
    if config_path is None:
        return PROJECT_CONFIG, Path.cwd()
    return _load_or_exit(config_path), Path(config_path).resolve().parent


@app.command()
def show(
    config_file: Path = typer.Option(None, "--config", help="Path to config file"),
):
    """Print the configuration as JSON"""
    config = _load_or_exit(config_file) if config_file else PROJECT_CONFIG
    typer.echo(config.to_json())


@app.command()
def resolve(
    files: list[Path] = typer.Argument(..., help="Files to resolve options for"),
    config_file: Path = typer.Option(None, "--config", help="Path to config file"),
    defaults: bool = typer.Option(False, "--defaults", help="Fill unset options with formatter defaults"),
):
    """Print the effective options for each file"""
    resolved = {}

    for file_path in files:
        config, root = _config_for(file_path, config_file)
        resolved[str(file_path)] = resolve_options(config, file_path, root=root, with_defaults=defaults)

    typer.echo(json.dumps(resolved, indent=2))


@app.command()
def check(
    config_file: Path = typer.Argument(..., help="Config file to validate"),
):
    """Validate a configuration file"""
    config = _load_or_exit(config_file)
    typer.echo(f"OK: {config_file} ({len(config.overrides)} overrides)")


@app.command()
def find(
    directory: Path = typer.Argument(Path("."), help="Directory to search from"),
):
    """Print the path of the config file governing a directory"""
    found = find_config(directory)
    if found is None:
        typer.echo(f"No formatter config found from {directory}", err=True)
        raise typer.Exit(code=1)
    typer.echo(str(found))


if __name__ == "__main__":
    app()
