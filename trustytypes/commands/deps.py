from pathlib import Path

import structlog
import typer
from rich.table import Table

from trustytypes.core.decorators import handle_errors
from trustytypes.core.logging import console
from trustytypes.core.storage import load_dependencies
from trustytypes.models.dependency import deps_to_map
from trustytypes.models.dependency import diff_dependencies
from trustytypes.models.ecosystem import Ecosystem

logger = structlog.get_logger('deps_command')
app = typer.Typer(help='Dependency snapshot commands')


@app.command()
@handle_errors
def diff(
    old: Path = typer.Argument(..., help='Dependency snapshot before the change'),
    new: Path = typer.Argument(..., help='Dependency snapshot after the change'),
    ecosystem: str | None = typer.Option(
        None, help='Only compare dependencies of this ecosystem (e.g. npm, PyPI)',
    ),
):
    """
    Show dependencies present in NEW but not in OLD.

    Snapshots are JSON arrays or JSONL files of {name, version, ecosystem}.
    Version bumps and removals are not reported.
    """
    old_deps = load_dependencies(old)
    new_deps = load_dependencies(new)

    if ecosystem:
        target = Ecosystem.from_string(ecosystem)
        old_deps = [d for d in old_deps if d.ecosystem == target]
        new_deps = [d for d in new_deps if d.ecosystem == target]

    added = diff_dependencies(deps_to_map(old_deps), deps_to_map(new_deps))
    logger.info(
        'Compared dependency snapshots',
        old=len(old_deps), new=len(new_deps), added=len(added),
    )

    if not added:
        console.print('[green]No new dependencies.[/green]')
        return

    table = Table(title=f"New dependencies ({len(added)})")
    table.add_column('Name', style='cyan')
    table.add_column('Version', style='magenta')
    for name in sorted(added):
        table.add_row(name, added[name])
    console.print(table)


@app.command()
def ecosystems():
    """
    List the ecosystems Trusty understands.
    """
    table = Table(title='Ecosystems')
    table.add_column('Code', justify='right')
    table.add_column('Name', style='cyan')
    for eco in Ecosystem:
        table.add_row(str(eco.value), eco.as_string())
    console.print(table)
