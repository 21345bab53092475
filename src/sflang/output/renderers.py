"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  Renderers
are dispatched by ``result.op`` in :func:`render_result`; unknown ops
fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from sflang.domain.types import FormatFlag
from sflang.output.console import create_console, get_output, style_for_flags

if TYPE_CHECKING:
    from rich.console import Console

    from sflang.services.result import ServiceResult

_DATA_PREVIEW = 60

_FLAG_BY_NAME: dict[str, FormatFlag] = {
    "bold": FormatFlag.BOLD,
    "italic": FormatFlag.ITALIC,
    "underline": FormatFlag.UNDERLINE,
}


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    width: int | None = None,
    show_keys: bool = False,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal, which is
    the case inside Click's CliRunner and piped output.
    """
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose, show_keys=show_keys)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="sfl.ok"), Text(f"  {result.op}", style="sfl.op"))


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="sfl.key"), Text(str(value)), sep="")


def _preview(data: str) -> str:
    flat = data.replace("\n", "\\n")
    if len(flat) > _DATA_PREVIEW:
        return flat[: _DATA_PREVIEW - 1] + "…"
    return flat


def _pairs(mapping: dict[str, Any]) -> str:
    return ", ".join(f"{k}={v}" for k, v in mapping.items())


def _flags_from_names(names: list[str]) -> FormatFlag:
    flags = FormatFlag.NONE
    for name in names:
        flags |= _FLAG_BY_NAME.get(name, FormatFlag.NONE)
    return flags


def runs_to_text(runs: list[dict[str, Any]]) -> Text:
    """Build a Rich Text from serialised runs, styled by their flags."""
    text = Text()
    for run in runs:
        text.append(run["text"], style=style_for_flags(_flags_from_names(run["flags"])))
    return text


def _inline_runs(tree: dict[str, Any]) -> list[dict[str, Any]]:
    runs: list[dict[str, Any]] = []
    for child in tree.get("children", []):
        if "text" in child:
            runs.append(child)
        else:
            runs.extend(_inline_runs(child))
    return runs


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="sfl.error"),
        Text(f"  {result.op}", style="sfl.op"),
        Text(" — "),
        msg,
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Compile renderer ──────────────────────────────────────────────────


def _command_label(element: dict[str, Any], *, show_keys: bool) -> Text:
    resolved = element.get("resolved", {})
    label = Text()
    label.append(element["tag"], style="sfl.tag")
    if resolved.get("element") is None:
        label.append("  (placeholder)", style="sfl.placeholder")
    else:
        label.append(f"  <{resolved['element']}>", style="sfl.element")

    inline = resolved.get("inline")
    if inline is not None:
        label.append("  ")
        label.append_text(runs_to_text(_inline_runs(inline)))
    elif resolved.get("text"):
        label.append(f"  {_preview(resolved['text'])}", style="sfl.data")
    elif element.get("data"):
        label.append(f"  {_preview(element['data'])}", style="sfl.key")

    attrs = {**resolved.get("style", {}), **resolved.get("props", {})}
    if attrs:
        label.append(f"  [{_pairs(attrs)}]", style="sfl.key")
    if show_keys and "key" in element:
        label.append(f"  key={element['key']}", style="sfl.key")
    return label


def _add_elements(
    tree: Tree,
    elements: list[dict[str, Any]],
    *,
    show_keys: bool,
) -> None:
    for element in elements:
        kind = element["kind"]
        if kind == "command":
            tree.add(_command_label(element, show_keys=show_keys))
        elif kind == "container_start":
            label = Text(f"▸ {element['name']}", style="sfl.container")
            if element.get("style"):
                label.append(f"  [{_pairs(element['style'])}]", style="sfl.key")
            tree.add(label)
        else:
            branch = tree.add(Text(f"▾ {element['name']}", style="sfl.container"))
            _add_elements(branch, element.get("elements", []), show_keys=show_keys)


def _render_compile(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    show_keys: bool = False,
) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "source", d.get("source"))
    if d.get("background"):
        _field(console, "background", d["background"])

    tree = Tree(Text("document", style="bold"))
    _add_elements(tree, d.get("elements", []), show_keys=show_keys)
    console.print(tree)

    if verbose and result.meta:
        console.print(Text("  meta:", style="dim"))
        for k, v in result.meta.items():
            console.print(f"    {k}: {v}")


# ── Format renderer ───────────────────────────────────────────────────


def _render_format(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    show_keys: bool = False,
) -> None:
    _status_line(console, result)
    runs = result.data.get("runs", [])
    console.print(Text("  "), runs_to_text(runs), sep="")
    if verbose:
        table = Table(show_header=True, pad_edge=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Text")
        table.add_column("Flags", style="sfl.key")
        for index, run in enumerate(runs):
            table.add_row(str(index), repr(run["text"]), ", ".join(run["flags"]) or "-")
        console.print(table)


# ── Tags renderer ─────────────────────────────────────────────────────


def _render_tags(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    show_keys: bool = False,
) -> None:
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Tag", style="sfl.tag", no_wrap=True)
    table.add_column("Element", style="sfl.element")
    table.add_column("Data")
    table.add_column("Options")
    for item in result.data.get("items", []):
        if verbose:
            options = "; ".join(
                f"{key}→{'/'.join(targets)}" for key, targets in item["targets"].items()
            )
        else:
            options = ", ".join(item["options"])
        table.add_row(item["tag"], item["element"], item["data"], options)
    console.print(table)

    container = result.data.get("container")
    if container:
        _field(console, "containers", f"{container['start']} / {container['end']}")


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    show_keys: bool = False,
) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_Renderer = Callable[..., None]

_OP_RENDERERS: dict[str, _Renderer] = {
    "compile": _render_compile,
    "format": _render_format,
    "tags": _render_tags,
}
