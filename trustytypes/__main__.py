import typer

from trustytypes.__version__ import __version__
from trustytypes.commands import deps
from trustytypes.commands import report
from trustytypes.core.logging import console
from trustytypes.core.logging import setup_logging

app = typer.Typer(
    help='trustytypes: inspect Trusty package reports and dependency snapshots.',
    no_args_is_help=True,
    pretty_exceptions_show_locals=False,
)

app.add_typer(report.app, name='report')
app.add_typer(deps.app, name='deps')


def _version_callback(value: bool):
    if value:
        console.print(f"trustytypes {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    debug: bool = typer.Option(False, '--debug', help='Enable debug logging'),
    version: bool = typer.Option(
        False, '--version', callback=_version_callback, is_eager=True,
        help='Show the version and exit',
    ),
):
    """
    trustytypes CLI.
    """
    level = 'DEBUG' if debug else 'INFO'
    setup_logging(level=level)


if __name__ == '__main__':
    app()
