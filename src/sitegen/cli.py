"""CLI entry point for sitegen."""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import DEFAULT_CONFIG, INIT_SOURCE_EXTENSIONS, ParserConfig, load_config
from .exceptions import ConfigurationError, MissingFieldError, SourceReadError

console = Console()


@click.group()
@click.option("--config", "-c", "config_path", default=None, help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Log parser details")
@click.pass_context
def cli(ctx, config_path, verbose):
    """sitegen - inspect the metadata of static-site content sources."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


def _get_parser_config(ctx, directory: str | None = None) -> ParserConfig:
    try:
        config = load_config(ctx.obj.get("config_path"))
        if directory:
            config["content_path"] = str(Path(directory).expanduser().resolve())
        return ParserConfig.from_config(config)
    except ConfigurationError as e:
        console.print(f"[red]{e}[/]")
        ctx.exit(1)


def _load_index(ctx, cfg: ParserConfig):
    from .source.processor import process_directory

    if not Path(cfg.content_root).exists():
        console.print(f"[red]Content directory not found: {cfg.content_root}[/]")
        ctx.exit(1)
    try:
        return process_directory(cfg)
    except SourceReadError as e:
        console.print(f"[red]✗ {e}[/]")
        ctx.exit(1)


@cli.command()
@click.option("--path", default=None, help="Directory to write sitegen.yaml into")
def init(path):
    """Write a default sitegen.yaml configuration."""
    import yaml

    target_dir = Path(path).expanduser().resolve() if path else Path.cwd()
    target_dir.mkdir(parents=True, exist_ok=True)
    config_file = target_dir / "sitegen.yaml"
    if config_file.exists():
        console.print(f"[yellow]Config already exists: {config_file}[/]")
        return

    cfg = dict(DEFAULT_CONFIG)
    cfg["source_extensions"] = list(INIT_SOURCE_EXTENSIONS)
    header = (
        "# Root directory holding content source files\n"
        "# (override with SITEGEN_CONTENT_PATH)\n"
        "# Only files with these suffixes are parsed; an empty list accepts all\n"
    )
    config_file.write_text(header + yaml.dump(cfg, default_flow_style=False, sort_keys=False))
    console.print(f"[green]✓ Created config: {config_file}[/]")


@cli.command()
@click.argument("file")
@click.pass_context
def parse(ctx, file):
    """Parse one source file and show its metadata."""
    from .source.parser import SourceParser

    cfg = _get_parser_config(ctx)
    try:
        record = SourceParser(cfg).parse(file)
    except SourceReadError as e:
        console.print(f"[red]✗ {e}[/]")
        ctx.exit(1)

    table = Table(title=record.basename)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in record.fields.items():
        table.add_row(key, value)
    console.print(table)
    console.print(f"  [dim]Body: {len(record.body)} character(s)[/]")

    if not record.get_string(cfg.template_key):
        console.print(f"  [yellow]No '{cfg.template_key}' field[/]")


@cli.command()
@click.argument("directory", required=False)
@click.pass_context
def index(ctx, directory):
    """Parse every source file under the content root and list the index."""
    cfg = _get_parser_config(ctx, directory)
    idx = _load_index(ctx, cfg)

    if not len(idx):
        console.print("[yellow]No source files found.[/]")
        return

    table = Table(title=f"Index ({len(idx)} entries)")
    table.add_column("#", style="dim", width=4)
    table.add_column("Basename", style="cyan")
    table.add_column("Title")
    table.add_column("Output", style="green")
    for i, record in enumerate(idx, 1):
        table.add_row(str(i), record.basename, record.get_string(cfg.title_key), record.get_string(cfg.output_key))
    console.print(table)


@cli.command()
@click.argument("directory", required=False)
@click.pass_context
def check(ctx, directory):
    """Report source files missing a template or output field."""
    from .source.processor import require_fields, required_keys

    cfg = _get_parser_config(ctx, directory)
    idx = _load_index(ctx, cfg)
    keys = required_keys(cfg)

    problems = 0
    for record in idx:
        try:
            require_fields(record, keys)
        except MissingFieldError as e:
            problems += 1
            console.print(f"  [red]✗ {e}[/]")

    if problems:
        console.print(f"[red]{problems} of {len(idx)} source file(s) incomplete[/]")
        ctx.exit(1)
    console.print(f"[green]✓ {len(idx)} source file(s) OK[/]")


if __name__ == "__main__":
    cli()
