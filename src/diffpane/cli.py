"""diffpane CLI — Typer application with show, compare, stats, and init commands."""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from rich.console import Console

from diffpane import __version__

app = typer.Typer(
    name="diffpane",
    help="Render unified diffs with highlighting in the terminal.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _read_diff(source: str) -> str:
    """Read diff text from a file path, or stdin for ``-``."""
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.is_file():
        console.print(f"[bold red]Error:[/bold red] diff file not found: {source}")
        raise typer.Exit(code=2)
    return path.read_text(encoding="utf-8", errors="replace")


def _preview_overrides(
    header_style: Optional[str],
    highlight_style: Optional[str],
    layout: Optional[str],
    wrap: Optional[bool],
    hide_no_newline: bool,
) -> Dict[str, Any]:
    preview: Dict[str, Any] = {}
    if header_style is not None:
        preview["header_style"] = header_style
    if highlight_style is not None:
        preview["highlight_style"] = highlight_style
    if layout is not None:
        preview["layout"] = layout
    if wrap is not None:
        preview["wrap"] = wrap
    if hide_no_newline:
        preview["show_no_newline"] = False
    return {"preview": preview} if preview else {}


def _load(config: Optional[str], overrides: Dict[str, Any]):
    from diffpane.config.loader import ConfigError, load_config

    try:
        return load_config(Path.cwd(), config, overrides)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _paint(diff_text: str, cfg, label: Optional[str], source: Optional[str], width: Optional[int]) -> None:
    """Render into an in-memory surface on an asyncio loop, then print it."""
    from diffpane.host.aio import AsyncioScheduler
    from diffpane.host.memory import MemorySurface
    from diffpane.host.terminal import TerminalPresenter
    from diffpane.render.pipeline import render_diff
    from diffpane.render.surface import Window

    out = Console()
    window = Window(width or out.width)

    async def run() -> MemorySurface:
        scheduler = AsyncioScheduler()
        surface = MemorySurface()
        render_diff(
            surface,
            diff_text,
            label,
            source,
            config=cfg.preview,
            scheduler=scheduler,
            budget=cfg.budget,
            window=window,
        )
        await scheduler.drain()
        return surface

    surface = asyncio.run(run())
    TerminalPresenter(out).show(surface)


# ── show ──────────────────────────────────────────────────────────────────────


@app.command()
def show(
    diff_file: str = typer.Argument("-", help="Unified diff file, or - for stdin"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .diffpane.toml"),
    header_style: Optional[str] = typer.Option(None, "--header-style", help="verbatim | summary | suppressed"),
    highlight_style: Optional[str] = typer.Option(None, "--highlight-style", help="full | text"),
    layout: Optional[str] = typer.Option(None, "--layout", "-l", help="inline | side_by_side"),
    wrap: Optional[bool] = typer.Option(None, "--wrap/--no-wrap", help="Wrap long lines"),
    hide_no_newline: bool = typer.Option(False, "--hide-no-newline", help="Hide '\\ No newline' markers"),
    label: Optional[str] = typer.Option(None, "--label", help="File name shown above the diff"),
    source: Optional[str] = typer.Option(None, "--source", help="Source tag shown next to the label"),
    width: Optional[int] = typer.Option(None, "--width", "-w", help="Window width (default: terminal)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write debug logs to a file"),
) -> None:
    """Render a unified diff with highlighting."""
    from diffpane.log import configure_logging

    configure_logging(verbose=verbose, debug=debug, log_file=log_file)
    cfg = _load(
        config,
        _preview_overrides(header_style, highlight_style, layout, wrap, hide_no_newline),
    )
    _paint(_read_diff(diff_file), cfg, label, source, width)


# ── compare ───────────────────────────────────────────────────────────────────


@app.command()
def compare(
    old: Path = typer.Argument(..., help="Old version of the file"),
    new: Path = typer.Argument(..., help="New version of the file"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .diffpane.toml"),
    algorithm: Optional[str] = typer.Option(None, "--algorithm", "-a", help="myers | minimal | patience | histogram"),
    context: Optional[int] = typer.Option(None, "--context", "-U", help="Lines of context"),
    header_style: Optional[str] = typer.Option(None, "--header-style", help="verbatim | summary | suppressed"),
    layout: Optional[str] = typer.Option(None, "--layout", "-l", help="inline | side_by_side"),
    width: Optional[int] = typer.Option(None, "--width", "-w", help="Window width (default: terminal)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug logging"),
) -> None:
    """Diff two files with git and render the result."""
    from diffpane.git.adapter import GitError, diff_files
    from diffpane.log import configure_logging

    configure_logging(verbose=verbose, debug=debug)
    overrides = _preview_overrides(header_style, None, layout, None, False)
    diff_section: Dict[str, Any] = {}
    if algorithm is not None:
        diff_section["algorithm"] = algorithm
    if context is not None:
        diff_section["context_lines"] = context
    if diff_section:
        overrides["diff"] = diff_section
    cfg = _load(config, overrides)

    try:
        diff_text = diff_files(old, new, cfg.diff)
    except GitError as exc:
        console.print(f"[bold red]Git error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if not diff_text.strip():
        console.print("[dim]Files are identical.[/dim]")
        raise typer.Exit(code=0)

    _paint(diff_text, cfg, str(new), "git", width)


# ── stats ─────────────────────────────────────────────────────────────────────


@app.command()
def stats(
    diff_file: str = typer.Argument("-", help="Unified diff file, or - for stdin"),
    format: str = typer.Option("terminal", "--format", "-f", help="Output format: terminal | json"),
) -> None:
    """Count added, deleted, and changed (hunk) lines in a diff."""
    from diffpane.diff.parser import get_diff_stats

    if format not in ("terminal", "json"):
        console.print(f"[bold red]Invalid format:[/bold red] {format}")
        raise typer.Exit(code=2)

    summary = get_diff_stats(_read_diff(diff_file))
    if format == "json":
        print(json.dumps(summary, indent=2))
        return

    out = Console()
    out.print(f"[green]+{summary['added']}[/green]  ", end="")
    out.print(f"[red]-{summary['deleted']}[/red]  ", end="")
    out.print(f"[yellow]~{summary['changed']} hunks[/yellow]")


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init(
    full: bool = typer.Option(False, "--full", help="Include render budget options"),
) -> None:
    """Generate a starter .diffpane.toml in the current directory."""
    from diffpane.config.defaults import DEFAULT_TOML, FULL_TOML
    from diffpane.config.loader import CONFIG_FILENAME

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    template = FULL_TOML if full else DEFAULT_TOML
    config_path.write_text(template, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"diffpane {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """diffpane — Render unified diffs with highlighting."""
