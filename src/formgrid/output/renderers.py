"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from formgrid.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from formgrid.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()
    if result.ok:
        _status_line(console, result)
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if result.op == "resolve_groups":
        return "\n".join(g["name"] for g in result.data.get("groups", []))
    if result.op == "filter_controls":
        return "\n".join(result.data.get("controls", []))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="fg.ok"), Text(f"  {result.op}", style="fg.op"), sep="")


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="fg.key"), Text(str(value)), sep="")


def _render_error(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    msg = result.error.message if result.error else "Unknown error"
    label = Text("ERROR", style="fg.error")
    console.print(label, Text(f"  {result.op}", style="fg.op"), sep="")
    console.print(Text(f"  {msg}"))
    if verbose and result.error and result.error.detail:
        console.print(Text("  detail:", style="fg.key"))
        for key, value in result.error.detail.items():
            console.print(Text(f"    {key}: {value}"))


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        console.print(Text(f"    {key}: {json.dumps(value)}"))


def _group_title(group: dict[str, Any]) -> Text:
    style = "fg.group" if group.get("source") == "group" else "fg.container"
    label = group.get("label") or ("(root)" if group.get("root") else group.get("name") or "")
    title = Text(str(label), style=style)
    if group.get("name") and group.get("name") != label:
        title.append(f"  [{group['name']}]", style="fg.key")
    title.append(f"  level {group.get('level', 0)}", style="fg.key")
    return title


def _add_group(tree: Tree, group: dict[str, Any]) -> None:
    branch = tree.add(_group_title(group))
    if group.get("description"):
        branch.add(Text(str(group["description"]), style="italic"))
    for item in group.get("controls", []):
        if isinstance(item, dict):
            _add_group(branch, item)
        else:
            branch.add(Text(str(item), style="fg.control"))


# ── Operation renderers ──────────────────────────────────────────────


def _render_groups(result: ServiceResult, console: Console) -> None:
    tree = Tree(Text(f"{result.data.get('form')} — {result.data.get('count', 0)} groups"))
    for group in result.data.get("groups", []):
        _add_group(tree, group)
    console.print(tree)


def _render_tree(result: ServiceResult, console: Console) -> None:
    _field(console, "group_level", result.data.get("group_level"))
    _field(console, "depth", result.data.get("depth"))
    tree = Tree(Text(str(result.data.get("form"))))
    _add_group(tree, result.data.get("tree", {}))
    console.print(tree)


def _render_controls(result: ServiceResult, console: Console) -> None:
    _field(console, "mode", result.data.get("mode"))
    _field(console, "count", result.data.get("count", 0))
    for path in result.data.get("controls", []):
        console.print(Text(f"    {path}"))


def _render_grid(result: ServiceResult, console: Console) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("parameter")
    table.add_column("units", justify="right")
    for key, value in result.data.items():
        if key != "offset_class":
            table.add_row(key, str(value))
    console.print(table)
    if result.data.get("offset_class"):
        _field(console, "offset_class", result.data["offset_class"])


def _render_errors(result: ServiceResult, console: Console) -> None:
    _field(console, "count", result.data.get("count", 0))
    for error in result.data.get("errors", []):
        console.print(Text(f"    {error}", style="fg.warning"))


def _render_plan(result: ServiceResult, console: Console) -> None:
    tree = Tree(Text(str(result.data.get("form"))))
    groups = tree.add(Text("groups", style="fg.key"))
    for group in result.data.get("groups", []):
        _add_group(groups, group)
    fields = tree.add(Text("fields", style="fg.key"))
    for path in result.data.get("controls", []):
        fields.add(Text(path, style="fg.control"))
    buttons = tree.add(Text("buttons", style="fg.key"))
    for path in result.data.get("buttons", []):
        buttons.add(Text(path, style="fg.button"))
    console.print(tree)
    for error in result.data.get("errors", []):
        console.print(Text(f"  error: {error}", style="fg.warning"))


def _render_generic(result: ServiceResult, console: Console) -> None:
    for key, value in result.data.items():
        _field(console, key, json.dumps(value) if isinstance(value, (dict, list)) else value)


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "resolve_groups": _render_groups,
    "group_tree": _render_tree,
    "filter_controls": _render_controls,
    "grid": _render_grid,
    "find_errors": _render_errors,
    "render_plan": _render_plan,
}
