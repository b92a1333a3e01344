"""CLI entry point for repodeck."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.tree import Tree

from repodeck.cache import cache_ttl, create_cache
from repodeck.config import RepoDeckConfig, load_config
from repodeck.config.loader import DEFAULT_CONFIG_TEMPLATE
from repodeck.log import configure_logging
from repodeck.output import JsonPresentationStore, PresentationSummary
from repodeck.pipeline import PipelineOrchestrator, Progress, Stage
from repodeck.script import AUDIENCES, generate_script
from repodeck.slides import SlidePresentation
from repodeck.vcs import create_source

app = typer.Typer(
    name="repodeck",
    help="Turn a GitHub repository into a timed, five-part slide presentation.",
)

config_app = typer.Typer(help="Manage repodeck configuration.")
app.add_typer(config_app, name="config")

cache_app = typer.Typer(help="Manage the repository metadata cache.")
app.add_typer(cache_app, name="cache")

MODES = ("ted", "imrad")
LANGUAGES = ("ja", "en", "zh")
DURATIONS = (3, 5)

# Global state
_config: RepoDeckConfig | None = None


def _get_config() -> RepoDeckConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to repodeck.yaml")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    configure_logging("debug" if verbose else _config.log_level, _config.log_format)


def _store(cfg: RepoDeckConfig, output: str | None = None) -> JsonPresentationStore:
    storage = cfg.storage
    if output:
        storage = storage.model_copy(update={"base_dir": output})
    return JsonPresentationStore(storage)


def _print_progress(event: Progress) -> None:
    if event.stage == Stage.error:
        rprint(f"[red]{event.progress:3d}%[/red] {event.message}")
    else:
        rprint(
            f"[dim]{event.progress:3d}%[/dim] [cyan]{event.stage.value:<10}[/cyan] {event.message}"
        )


def _summary_table(rows: list[PresentationSummary], title: str) -> Table:
    table = Table(title=f"{title} ({len(rows)})")
    table.add_column("ID", style="cyan")
    table.add_column("Title")
    table.add_column("Mode")
    table.add_column("Lang")
    table.add_column("Min", justify="right")
    table.add_column("Slides", justify="right")
    table.add_column("Updated", style="dim")
    for r in rows:
        table.add_row(
            r.id,
            r.title,
            r.mode,
            r.language,
            str(r.duration),
            str(r.slide_count),
            r.updated_at.strftime("%Y-%m-%d %H:%M"),
        )
    return table


def _display_presentation(presentation: SlidePresentation, notes: bool = False) -> None:
    meta = presentation.repository
    panel_text = (
        f"[bold]{presentation.title}[/bold]\n"
        f"[dim]ID:[/dim]         {presentation.id}\n"
        f"[dim]Repository:[/dim] {meta.url}\n"
        f"[dim]Mode:[/dim]       {presentation.mode}  "
        f"[dim]Language:[/dim] {presentation.language}  "
        f"[dim]Duration:[/dim] {presentation.duration} min ({presentation.total_seconds}s)"
    )
    if meta.degraded:
        panel_text += "\n[yellow]Built from synthesized metadata (fetch failed)[/yellow]"
    rprint(Panel(panel_text, title="Presentation", border_style="blue"))

    tree = Tree(f"[bold]Slides[/bold] ({len(presentation.slides)})")
    for slide in presentation.slides:
        node = tree.add(
            f"[cyan]{slide.id}[/cyan] [bold]{slide.title}[/bold] "
            f"[dim]({slide.type.value}, {slide.duration}s)[/dim]"
        )
        for bullet in slide.bullets:
            node.add(bullet)
        if slide.chart is not None:
            pairs = ", ".join(
                f"{label}={value}" for label, value in zip(slide.chart.labels, slide.chart.data)
            )
            node.add(f"[magenta]{slide.chart.type} chart:[/magenta] {pairs}")
        if slide.code is not None:
            node.add(f"[magenta]code:[/magenta] {slide.code.language}")
        if notes:
            node.add(f"[dim]notes: {slide.speaker_notes}[/dim]")
    rprint(tree)


@app.command()
def generate(
    url: str = typer.Argument(..., help="GitHub repository URL"),
    mode: Annotated[
        str | None, typer.Option("--mode", "-m", help="ted | imrad")
    ] = None,
    duration: Annotated[
        int | None, typer.Option("--duration", "-d", help="Length in minutes: 3 | 5")
    ] = None,
    lang: Annotated[str | None, typer.Option("--lang", "-l", help="ja | en | zh")] = None,
    no_cache: bool = typer.Option(False, "--no-cache", help="Bypass the metadata cache"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Preview without saving"),
    output: Annotated[
        str | None, typer.Option("--output", "-o", help="Override storage directory")
    ] = None,
    notes: bool = typer.Option(False, "--notes", help="Show speaker notes"),
) -> None:
    """Generate a presentation for a repository."""
    cfg = _get_config()
    mode = cfg.defaults.mode if mode is None else mode
    duration = cfg.defaults.duration if duration is None else duration
    lang = cfg.defaults.language if lang is None else lang

    if mode not in MODES:
        rprint(f"[red]Error:[/red] mode must be one of {', '.join(MODES)}")
        raise typer.Exit(1)
    if duration not in DURATIONS:
        rprint("[red]Error:[/red] duration must be 3 or 5")
        raise typer.Exit(1)
    if lang not in LANGUAGES:
        rprint(f"[red]Error:[/red] language must be one of {', '.join(LANGUAGES)}")
        raise typer.Exit(1)

    orchestrator = PipelineOrchestrator(
        source=create_source(cfg.github),
        cache=None if no_cache else create_cache(cfg.cache),
        store=None if dry_run else _store(cfg, output),
        cache_ttl=cache_ttl(cfg.cache),
    )

    rprint(f"[bold]Generating[/bold] {mode.upper()} {duration}-minute deck for {url} ({lang})...")
    run = asyncio.run(
        orchestrator.generate(
            url, mode, duration, lang, on_progress=_print_progress, use_cache=not no_cache
        )
    )

    if not run.succeeded or run.presentation is None:
        stage = run.failed_stage.value if run.failed_stage else "unknown"
        rprint(f"[red]Generation failed[/red] at stage '{stage}': {run.error}")
        raise typer.Exit(1)

    _display_presentation(run.presentation, notes=notes)
    if run.saved_to:
        rprint(f"[green]Saved[/green] {run.saved_to}")
    elif dry_run:
        rprint("[yellow]Dry run: presentation not saved.[/yellow]")


@app.command()
def show(
    presentation_id: str = typer.Argument(..., help="Presentation ID"),
    notes: bool = typer.Option(False, "--notes", help="Show speaker notes"),
    as_json: bool = typer.Option(False, "--json", help="Print the stored JSON"),
) -> None:
    """Show a stored presentation."""
    presentation = _store(_get_config()).get(presentation_id)
    if presentation is None:
        rprint(f"[red]Not found:[/red] {presentation_id}")
        raise typer.Exit(1)
    if as_json:
        rprint(Syntax(presentation.model_dump_json(indent=2), "json"))
        return
    _display_presentation(presentation, notes=notes)


@app.command()
def script(
    presentation_id: str = typer.Argument(..., help="Presentation ID"),
    audience: Annotated[
        str, typer.Option("--audience", "-a", help="technical | business | general")
    ] = "general",
    as_json: bool = typer.Option(False, "--json", help="Print the script as JSON"),
) -> None:
    """Show a timed speaker script for a stored presentation."""
    if audience not in AUDIENCES:
        rprint(f"[red]Error:[/red] audience must be one of {', '.join(AUDIENCES)}")
        raise typer.Exit(1)
    presentation = _store(_get_config()).get(presentation_id)
    if presentation is None:
        rprint(f"[red]Not found:[/red] {presentation_id}")
        raise typer.Exit(1)

    talk = generate_script(
        presentation.story,
        presentation.repository,
        presentation.duration,
        audience,
        presentation.language,
    )
    if as_json:
        rprint(Syntax(talk.model_dump_json(indent=2), "json"))
        return

    rprint(
        Panel(
            f"[bold]{presentation.title}[/bold]\n"
            f"[dim]Audience:[/dim] {talk.audience}  "
            f"[dim]Difficulty:[/dim] {talk.difficulty}  "
            f"[dim]Total:[/dim] {talk.total_seconds}s",
            title="Speaker Script",
            border_style="blue",
        )
    )
    tree = Tree(f"[bold]Sections[/bold] ({len(talk.sections)})")
    for section in talk.sections:
        timing = section.timing
        node = tree.add(
            f"[bold]{section.title}[/bold] "
            f"[dim]({timing.estimated}s, {timing.minimum}-{timing.maximum}s)[/dim]"
        )
        if section.transition is not None:
            node.add(f"[magenta]bridge:[/magenta] {section.transition.bridge_text}")
        for cue in section.cues:
            node.add(f"[cyan]{cue.at_seconds:>3}s[/cyan] [dim]{cue.type}[/dim] {cue.content}")
    rprint(tree)


@app.command("list")
def list_presentations() -> None:
    """List stored presentations, newest first."""
    rows = _store(_get_config()).list()
    if not rows:
        rprint("[yellow]No presentations stored yet.[/yellow]")
        raise typer.Exit(0)
    rprint(_summary_table(rows, "Presentations"))


@app.command()
def search(query: str = typer.Argument(..., help="Text to match in title or URL")) -> None:
    """Search stored presentations by title or repository URL."""
    rows = _store(_get_config()).search(query)
    if not rows:
        rprint(f"[yellow]No presentations match[/yellow] '{query}'")
        raise typer.Exit(0)
    rprint(_summary_table(rows, f"Matches for '{query}'"))


@app.command()
def delete(presentation_id: str = typer.Argument(..., help="Presentation ID")) -> None:
    """Delete a stored presentation."""
    if not _store(_get_config()).delete(presentation_id):
        rprint(f"[red]Not found:[/red] {presentation_id}")
        raise typer.Exit(1)
    rprint(f"[green]Deleted[/green] {presentation_id}")


@app.command()
def stats() -> None:
    """Summarize stored presentations by mode, language and duration."""
    result = _store(_get_config()).stats()
    table = Table(title="Presentation Stats")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Total", str(result.total))
    for mode, count in sorted(result.by_mode.items()):
        table.add_row(f"Mode: {mode}", str(count))
    for language, count in sorted(result.by_language.items()):
        table.add_row(f"Language: {language}", str(count))
    table.add_row(
        "Most used duration",
        f"{result.most_used_duration} min" if result.most_used_duration else "-",
    )
    rprint(table)


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default repodeck.yaml in current directory."""
    target = Path("repodeck.yaml")
    if target.exists() and not force:
        rprint("[yellow]repodeck.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


@cache_app.command("clear")
def cache_clear() -> None:
    """Delete every cached repository metadata entry."""
    cfg = _get_config()
    cache = create_cache(cfg.cache)
    if cache is None:
        rprint("[yellow]Cache is disabled in config.[/yellow]")
        raise typer.Exit(0)
    removed = cache.clear()
    rprint(f"[green]Cleared[/green] {removed} cached entr{'y' if removed == 1 else 'ies'}")


@cache_app.command("prune")
def cache_prune() -> None:
    """Delete expired cache entries only."""
    cfg = _get_config()
    cache = create_cache(cfg.cache)
    if cache is None:
        rprint("[yellow]Cache is disabled in config.[/yellow]")
        raise typer.Exit(0)
    removed = cache.prune()
    rprint(f"[green]Pruned[/green] {removed} expired entr{'y' if removed == 1 else 'ies'}")


if __name__ == "__main__":
    app()
