"""Rich renderers for ServiceResult.

Every gov operation reports the messages of its completed steps in
``data["steps"]``; the remaining data keys are printed as fields.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from gov.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from gov.services.result import ServiceResult


_PATH_KEYS = frozenset({"path", "source", "destination"})
_ENV_KEYS = frozenset({"GOROOT", "PATH"})


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()
    if result.ok:
        _render_ok(result, console)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


def _steps(console: Console, result: ServiceResult) -> None:
    for step in result.data.get("steps", []):
        console.print(Text(f"  {step}", style="gov.step"))


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="gov.key")
    if key in _PATH_KEYS:
        v = Text(str(value), style="gov.path")
    elif key in _ENV_KEYS:
        v = Text(str(value), style="gov.env")
    else:
        v = Text(str(value))
    console.print(k, v, sep="", end="")
    console.print()


def _render_ok(result: ServiceResult, console: Console) -> None:
    console.print(Text("OK", style="gov.ok"), Text(f"  {result.op}", style="gov.op"))
    _steps(console, result)
    for key, value in result.data.items():
        if key == "steps":
            continue
        _field(console, key, value)

def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    # Steps that completed before the failure are still reported.
    _steps(console, result)
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="gov.error")
    op = Text(f"  {result.op}", style="gov.op")
    console.print(label, op, Text(" — "), Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))
