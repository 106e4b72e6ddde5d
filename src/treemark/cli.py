"""treemark CLI — Typer application with ls, status, init, and groups commands."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Optional, Tuple

import typer
from rich.console import Console
from rich.logging import RichHandler

from treemark import __version__
from treemark.config.schema import OUTPUT_FORMATS, TreemarkConfig, is_valid_base_branch

app = typer.Typer(
    name="treemark",
    help="Show git status markers next to directory entries.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)
log = logging.getLogger(__name__)


def _configure_logging(verbose: bool, debug: bool) -> None:
    """Route the treemark loggers through Rich on stderr."""
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    logger = logging.getLogger("treemark")
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(
            RichHandler(console=console, show_time=False, show_path=False, markup=False)
        )


def _resolve_directory(directory: Optional[Path]) -> Path:
    path = (directory or Path.cwd()).expanduser().resolve()
    if not path.is_dir():
        console.print(f"[bold red]Error:[/bold red] Not a directory: {path}")
        raise typer.Exit(code=2)
    return path


def _config_root(directory: Path) -> Path:
    """Repository root when *directory* is inside one, else *directory*."""
    from treemark.git.adapter import GitError, get_repo_root

    try:
        return get_repo_root(directory)
    except GitError as exc:
        log.info("Not using a repository config: %s", exc)
        return directory


def _load_settings(
    directory: Path,
    config: Optional[str],
    base: Optional[str],
    committed: Optional[bool],
    ignored: Optional[bool],
) -> TreemarkConfig:
    """Load config for *directory* and apply CLI overrides."""
    from treemark.config.loader import ConfigError, load_config

    try:
        cfg = load_config(_config_root(directory), config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    overrides = {}
    if base is not None:
        if not is_valid_base_branch(base.strip()):
            console.print(f"[bold red]Invalid base branch:[/bold red] {base!r}")
            raise typer.Exit(code=2)
        overrides["base_branch"] = base.strip()
    if committed is not None:
        overrides["include_committed"] = committed
    if ignored is not None:
        overrides["show_ignored"] = ignored
    if overrides:
        cfg.status = dataclasses.replace(cfg.status, **overrides)
    return cfg


def _prepare(
    directory: Optional[Path],
    config: Optional[str],
    base: Optional[str],
    committed: Optional[bool],
    ignored: Optional[bool],
) -> Tuple[Path, TreemarkConfig]:
    path = _resolve_directory(directory)
    cfg = _load_settings(path, config, base, committed, ignored)
    return path, cfg


# ── ls ────────────────────────────────────────────────────────────────────────


@app.command()
def ls(
    directory: Optional[Path] = typer.Argument(None, help="Directory to list (default: cwd)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .treemark.toml"),
    base: Optional[str] = typer.Option(None, "--base", "-b", help="Base branch for ls-tree and committed changes"),
    committed: Optional[bool] = typer.Option(None, "--committed/--no-committed", help="Include base...HEAD changes"),
    ignored: Optional[bool] = typer.Option(None, "--ignored/--no-ignored", help="Mark untracked-by-git entries as ignored"),
    summary: Optional[bool] = typer.Option(None, "--summary/--no-summary", help="Print per-category counts"),
) -> None:
    """List a directory with index and working-tree markers."""
    from treemark.output import terminal
    from treemark.output.markers import build_markers, list_entries
    from treemark.refresh.loader import collect_git_status

    path, cfg = _prepare(directory, config, base, committed, ignored)

    try:
        entries = list_entries(path)
    except OSError as exc:
        console.print(f"[bold red]Error:[/bold red] Cannot list {path}: {exc}")
        raise typer.Exit(code=2) from exc

    result = collect_git_status(path, cfg.status)
    rows = build_markers(
        entries, result, show_ignored=cfg.status.show_ignored, symbols=cfg.symbols
    )
    terminal.render(
        rows,
        path,
        console=Console(),
        show_summary=cfg.output.show_summary if summary is None else summary,
        status_available=result is not None,
    )


# ── status ────────────────────────────────────────────────────────────────────


@app.command()
def status(
    directory: Optional[Path] = typer.Argument(None, help="Directory to inspect (default: cwd)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .treemark.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json | yaml"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write report to file"),
    base: Optional[str] = typer.Option(None, "--base", "-b", help="Base branch for ls-tree and committed changes"),
    committed: Optional[bool] = typer.Option(None, "--committed/--no-committed", help="Include base...HEAD changes"),
    ignored: Optional[bool] = typer.Option(None, "--ignored/--no-ignored", help="Mark untracked-by-git entries as ignored"),
) -> None:
    """Print the per-entry status map for a directory."""
    from treemark.output import json_report, terminal, yaml_report
    from treemark.output.markers import build_markers
    from treemark.refresh.loader import collect_git_status

    path, cfg = _prepare(directory, config, base, committed, ignored)

    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]

    result = collect_git_status(path, cfg.status)
    if result is None:
        console.print(f"[bold red]Git status unavailable:[/bold red] {path}")
        raise typer.Exit(code=2)

    base_branch = cfg.status.base_branch
    report_text: Optional[str] = None

    if cfg.output.format == "terminal":
        entries = [(name, (path / name).is_dir()) for name in sorted(result)]
        rows = build_markers(entries, result, show_ignored=False, symbols=cfg.symbols)
        terminal.render(rows, path, console=Console(), show_summary=cfg.output.show_summary)
    elif cfg.output.format == "json":
        report_text = json_report.render(result, path, base_branch=base_branch)
        print(report_text)
    elif cfg.output.format == "yaml":
        report_text = yaml_report.render(result, path, base_branch=base_branch)
        print(report_text, end="")

    if output:
        if report_text is None:
            # Terminal output goes to the screen; the file gets JSON.
            report_text = json_report.render(result, path, base_branch=base_branch)
        Path(output).write_text(report_text, encoding="utf-8")
        log.info("Report written to %s", output)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init(
    directory: Optional[Path] = typer.Argument(None, help="Where to look for the repository (default: cwd)"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config file"),
) -> None:
    """Generate a starter .treemark.toml in the repo root."""
    from treemark.config.defaults import CONFIG_FILENAME, DEFAULT_TOML

    root = _config_root(_resolve_directory(directory))
    config_path = root / CONFIG_FILENAME

    if config_path.exists() and not force:
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── groups ────────────────────────────────────────────────────────────────────


@app.command()
def groups() -> None:
    """List the highlight groups used for status markers."""
    from treemark.output import terminal
    from treemark.status.categories import highlight_groups

    terminal.render_groups(highlight_groups(), console=Console())


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"treemark {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output"),
) -> None:
    """treemark — git status markers for directory listings."""
    _configure_logging(verbose, debug)
