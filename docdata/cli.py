"""docdata CLI — the host entry point for turning parser output into data assets."""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from docdata import __version__
from docdata.errors import DocDataError

console = Console()
err_console = Console(stderr=True)


def _setup_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(version=__version__)
def main():
    """docdata — reshape parsed documentation into JSON data assets.

    Reads the doclet dump of a documentation-comment parser (``jsdoc -X``),
    keeps the documented entries, and writes a name -> record data module
    plus a sorted name index.
    """


# ── Publish ──────────────────────────────────────────────────────────


@main.command()
@click.argument("input_path", type=click.Path(dir_okay=False))
@click.option("--config", "-c", "config_path", default=None, help="YAML configuration file")
@click.option("--data-out", default=None, help="Path of the generated data module")
@click.option("--names-out", default=None, help="Path of the generated name index")
@click.option("--marker", default=None, help="Path segment that precedes package directories")
@click.option("--private/--no-private", default=None, help="Keep records with private access")
@click.option("--verbose", "-v", is_flag=True, help="Log per-kind details")
def publish(
    input_path: str,
    config_path: str | None,
    data_out: str | None,
    names_out: str | None,
    marker: str | None,
    private: bool | None,
    verbose: bool,
):
    """Normalize INPUT_PATH and write the data module and name index."""
    from docdata.config import load_config
    from docdata.pipeline import publish as run_publish
    from docdata.source.doclet_store import DocletStore

    _setup_logging(logging.DEBUG if verbose else logging.INFO)
    console.print(f"\n[bold blue]docdata[/] — Publishing: {input_path}\n")

    try:
        config = load_config(
            config_path,
            data_path=data_out,
            names_path=names_out,
            package_marker=marker,
            include_private=private,
        )
        store = DocletStore.from_file(input_path)
    except DocDataError as e:
        console.print(f"  [red]x[/] {e}")
        raise SystemExit(1)

    doc_set = run_publish(store, config)

    table = Table(title=f"Documented entries ({len(doc_set)} total)")
    table.add_column("Kind", style="cyan")
    table.add_column("Count", justify="right", style="green")
    for kind, count in sorted(doc_set.count_by_kind().items()):
        table.add_row(kind, str(count))
    console.print(table)

    console.print(f"\n[green]Data module written to:[/] {config.data_path}")
    console.print(f"[green]Name index written to:[/] {config.names_path}")


# ── Inspect ──────────────────────────────────────────────────────────


@main.command()
@click.argument("input_path", type=click.Path(dir_okay=False))
@click.argument("longname")
@click.option("--config", "-c", "config_path", default=None, help="YAML configuration file")
def inspect(input_path: str, longname: str, config_path: str | None):
    """Print the normalized record for LONGNAME without writing anything."""
    from docdata.config import load_config
    from docdata.pipeline import build_documentation_set
    from docdata.source.doclet_store import DocletStore
    from docdata.writer import canonical_json

    _setup_logging(logging.WARNING)

    try:
        config = load_config(config_path)
        store = DocletStore.from_file(input_path)
    except DocDataError as e:
        console.print(f"  [red]x[/] {e}")
        raise SystemExit(1)

    doc_set = build_documentation_set(store.prune(include_private=config.include_private), config)
    record = doc_set.get(longname)
    if record is None:
        console.print(f"[yellow]No documented entry named {longname}.[/]")
        raise SystemExit(1)

    click.echo(canonical_json(record.to_dict()))


if __name__ == "__main__":
    main()
