"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from skysync.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from skysync.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Upload and download print one touched path per line; everything else
    prints a single status line.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "upload":
        paths = [item["file"] for item in result.data.get("files", [])]
    elif result.op == "download":
        paths = [item["path"] for item in result.data.get("written", [])]
    else:
        paths = []

    return "\n".join(paths) if paths else f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    line = Text("OK", style="sync.ok")
    line.append(f"  {result.op}", style="sync.op")
    console.print(line)


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    line = Text(f"  {key}: ", style="sync.key")
    line.append(str(value), style="sync.path" if key in ("path", "dir") else "")
    console.print(line)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    line = Text("ERROR", style="sync.error")
    line.append(f"  {result.op}", style="sync.op")
    line.append(f" — {msg}")
    console.print(line)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Sync renderers ────────────────────────────────────────────────────


def _render_upload(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render uploaded files, one per line, with OneSky's status code."""
    _status_line(console, result)
    files = result.data.get("files", [])
    for item in files:
        line = Text("  Uploaded ")
        line.append(str(item.get("file", "")), style="sync.path")
        if verbose:
            line.append(f"  ({item.get('code')})", style="dim")
        console.print(line)
    _field(console, "count", result.data.get("count", len(files)))
    if verbose:
        _field(console, "is_keeping_all_strings", result.data.get("is_keeping_all_strings"))


def _render_download(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render per-locale progress: ``<dir>/`` then indented file names."""
    _status_line(console, result)
    d = result.data
    written_by_locale: dict[str, list[str]] = {}
    for item in d.get("written", []):
        written_by_locale.setdefault(item["locale"], []).append(item["path"])
    skipped_by_locale: dict[str, list[dict[str, Any]]] = {}
    for item in d.get("skipped", []):
        skipped_by_locale.setdefault(item["locale"], []).append(item)

    for entry in d.get("locales", []):
        locale = entry["locale"]
        style = "sync.base" if entry["dir"] == "." else "sync.locale"
        console.print(Text(f"{entry['dir']}/", style=style))
        for path in written_by_locale.get(locale, []):
            console.print(Text(f"  {path.rsplit('/', 1)[-1]}"))
        if verbose:
            for item in skipped_by_locale.get(locale, []):
                console.print(
                    Text(f"  {item['file']} skipped (HTTP {item['code']})", style="sync.skipped")
                )

    _field(console, "written", d.get("count", 0))
    if d.get("skipped"):
        _field(console, "skipped", len(d["skipped"]))


def _render_languages(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the project's languages as a table."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Code", style="sync.locale", no_wrap=True)
    table.add_column("Name")
    table.add_column("Base")
    table.add_column("Configured")
    if verbose:
        table.add_column("Progress", justify="right")

    for item in result.data.get("items", []):
        row = [
            str(item.get("code", "")),
            str(item.get("name", "")),
            "yes" if item.get("is_base_language") else "",
            "yes" if item.get("configured") else "",
        ]
        if verbose:
            row.append(str(item.get("progress", "")))
        table.add_row(*row)

    console.print(table)
    console.print(f"\n{result.data.get('count', 0)} languages")


def _render_init(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render init results with the resolved project settings."""
    _status_line(console, result)
    d = result.data
    for key in ("path", "base_locale", "string_path"):
        if key in d:
            _field(console, key, d[key])
    _field(console, "locales", ", ".join(d.get("locales", [])) or "(none)")


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "upload": _render_upload,
    "download": _render_download,
    "languages": _render_languages,
    "init": _render_init,
}
