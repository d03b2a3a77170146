from pathlib import Path

import structlog
import typer
from rich.panel import Panel
from rich.table import Table

from trustytypes.core.decorators import handle_errors
from trustytypes.core.logging import console
from trustytypes.models.report import Reply
from trustytypes.models.time import format_time
from trustytypes.services.report_service import ReportService

logger = structlog.get_logger('report_command')
app = typer.Typer(help='Package report commands')


def _score(value: float | None) -> str:
    return '-' if value is None else f"{value:.2f}"


def _render(reply: Reply, service: ReportService) -> None:
    summary = reply.summary
    status = str(reply.status) if reply.status else 'unknown'
    console.print(
        Panel.fit(
            f"[bold blue]{reply.package_name}[/bold blue] "
            f"{reply.package_version} ({reply.package_type})\n\n"
            f"Status: [bold]{status}[/bold]\n"
            f"Trust score: [bold green]{_score(summary.score)}[/bold green]\n"
            f"URL: {service.package_url(reply)}",
            title='Trusty Report',
        ),
    )

    if reply.is_malicious:
        malicious = reply.package_data.malicious
        published = format_time(malicious.published) if malicious.published else '-'
        console.print(
            Panel.fit(
                f"{malicious.summary}\n\nSource: {malicious.source}\n"
                f"Published: {published}",
                title='[bold red]Malicious package[/bold red]',
                border_style='red',
            ),
        )

    table = Table(title='Scores')
    table.add_column('Signal', style='cyan')
    table.add_column('Score', style='magenta', justify='right')
    table.add_column('Updated', style='dim')
    blocks = [
        ('Activity', reply.activity),
        ('Provenance', reply.provenance),
        ('Typosquatting', reply.typosquatting),
    ]
    for label, block in blocks:
        if block is None:
            table.add_row(label, '-', '-')
            continue
        updated = format_time(block.updated_at) if block.updated_at else '-'
        table.add_row(label, _score(block.score), updated)
    console.print(table)

    if reply.alternatives.packages:
        alt_table = Table(title='Alternatives')
        alt_table.add_column('Package', style='cyan')
        alt_table.add_column('Score', style='magenta', justify='right')
        alt_table.add_column('URL', style='dim')
        for alt in reply.alternatives.packages:
            alt_table.add_row(alt.package_name, _score(alt.score), alt.package_name_url)
        console.print(alt_table)


@app.command()
@handle_errors
def show(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help='Saved report JSON'),
    as_json: bool = typer.Option(
        False, '--json', help='Print the canonical JSON encoding instead of tables',
    ),
):
    """
    Decode a saved package report and display it.
    """
    service = ReportService()
    reply = service.fill_alternative_urls(service.load(path))

    if as_json:
        console.print_json(service.dump(reply))
        return

    _render(reply, service)
