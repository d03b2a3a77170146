import functools
from collections.abc import Callable
from typing import Any

import structlog
import typer
from pydantic import ValidationError
from rich.markup import escape

from trustytypes.core.logging import err_console

logger = structlog.get_logger('cli')


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to turn exceptions in CLI commands into exit codes."""
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except ValidationError as e:
            # ValidationError is a ValueError subclass, report it per field
            err_console.print(
                f"[bold red]Decode Error:[/] {e.error_count()} invalid field(s)",
            )
            for error in e.errors():
                location = '.'.join(str(part) for part in error['loc'])
                err_console.print(f"  [cyan]{location}[/]: {escape(error['msg'])}")
            logger.debug('Decode error', exc_info=True)
            raise typer.Exit(1)
        except (ValueError, OSError) as e:
            err_console.print(f"[bold red]Error:[/] {escape(str(e))}")
            logger.debug('Command failed', exc_info=True)
            raise typer.Exit(1)
        except KeyboardInterrupt:
            err_console.print('\n[yellow]Operation cancelled by user.[/]')
            raise typer.Exit(130)
        except Exception as e:
            err_console.print(f"[bold red]Unexpected Error:[/] {e}")
            logger.exception('Unexpected error')
            raise typer.Exit(1)
    return wrapper
