"""faithscan CLI — language detection and upload moderation from the shell."""

from __future__ import annotations

import json
import logging

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from faithscan import __version__

console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "-c", "config_path", default=None, help="Settings YAML (default: $FAITHSCAN_CONFIG)")
@click.option("--registry", "-r", "registry_path", default=None, help="Language data YAML (default: bundled)")
@click.option("--verbose", "-v", is_flag=True, help="Log each decision")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, registry_path: str | None, verbose: bool):
    """faithscan — detect the language of upload text and moderate it as devotional content.

    Supports English, Yoruba, Hausa and Igbo out of the box; pass --registry
    to load a different language table.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
    ctx.obj = {"config_path": config_path, "registry_path": registry_path}


def _load(ctx: click.Context):
    """Build the registry and settings named on the command line."""
    from faithscan.config import load_settings
    from faithscan.errors import ConfigError, RegistryError
    from faithscan.languages.registry import default_registry, load_registry

    opts = ctx.obj or {}
    try:
        registry = load_registry(opts["registry_path"]) if opts.get("registry_path") else default_registry()
        settings = load_settings(opts.get("config_path"))
    except (ConfigError, RegistryError) as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        ctx.exit(1)
    return registry, settings


# ── Languages ────────────────────────────────────────────────────────


@main.command()
@click.pass_context
def languages(ctx: click.Context):
    """List the supported languages and their vocabularies."""
    registry, _ = _load(ctx)

    table = Table(title=f"Supported Languages ({len(registry)})")
    table.add_column("Code", style="cyan")
    table.add_column("Name")
    table.add_column("Locales")
    table.add_column("Markers", justify="right")
    table.add_column("Gospel Keywords", justify="right", style="green")

    for sig in registry.signatures():
        table.add_row(
            sig.code,
            sig.name,
            ", ".join(sig.locales),
            str(len(sig.marker_words)),
            str(len(registry.gospel_keywords(sig.code))),
        )

    console.print(table)
    console.print(f"  Prohibited terms: {len(registry.prohibited_terms())}")


# ── Detect ───────────────────────────────────────────────────────────


@main.command()
@click.argument("text")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table")
@click.pass_context
def detect(ctx: click.Context, text: str, as_json: bool):
    """Detect the language of TEXT."""
    from faithscan.detection.detector import LanguageDetector

    registry, settings = _load(ctx)
    result = LanguageDetector(registry, settings.detector).detect_all(text)

    if as_json:
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return

    lang = result.language
    style = "yellow" if lang.is_unknown else "green"
    console.print(f"\n  Detected: [{style}]{lang.name}[/] ({lang.code}) confidence {lang.confidence:.2f}")

    if result.alternatives:
        table = Table(title="Alternatives")
        table.add_column("Code", style="cyan")
        table.add_column("Name")
        table.add_column("Confidence", justify="right")
        for alt in result.alternatives:
            table.add_row(alt.code, alt.name, f"{alt.confidence:.2f}")
        console.print(table)


# ── Scan ─────────────────────────────────────────────────────────────


@main.command()
@click.argument("text")
@click.pass_context
def scan(ctx: click.Context, text: str):
    """Show the gospel keywords and prohibited terms found in TEXT."""
    from faithscan.scanning.scanner import KeywordScanner

    registry, _ = _load(ctx)
    scanner = KeywordScanner(registry)

    prohibited = scanner.prohibited_matches(text)
    gospel = scanner.gospel_matches(text)

    if prohibited:
        console.print("[red]Prohibited terms:[/]")
        for term in prohibited:
            console.print(f"  [red]x[/] {escape(term)}")
    else:
        console.print("  [green]v[/] No prohibited terms")

    if gospel:
        console.print("[green]Gospel keywords:[/]")
        for code, words in gospel.items():
            console.print(f"  {registry.language_name(code)}: {escape(', '.join(words))}")
    else:
        console.print("  [yellow]![/] No gospel keywords")


# ── Moderate ─────────────────────────────────────────────────────────


@main.command()
@click.option("--title", "-t", required=True, help="Upload title")
@click.option("--transcript", default=None, help="Transcript of the spoken content")
@click.option("--description", "-d", default=None, help="Upload description")
@click.option("--content-type", default="music", help="music, videos, sermon, audio, ebook, devotional, ...")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.pass_context
def moderate(
    ctx: click.Context,
    title: str,
    transcript: str | None,
    description: str | None,
    content_type: str,
    as_json: bool,
):
    """Moderate one upload from its title, transcript and description."""
    from faithscan.moderation.engine import ModerationDecisionEngine

    registry, settings = _load(ctx)
    engine = ModerationDecisionEngine(registry, settings)
    result = engine.moderate_payload(
        {
            "title": title,
            "transcript": transcript,
            "description": description,
            "contentType": content_type,
        }
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return

    console.print(Panel(_summary(result), title="Moderation Result"))


def _summary(result) -> str:
    status = "[green]APPROVED[/]" if result.is_approved else "[red]REJECTED[/]"
    lines = [f"{status}  confidence {result.confidence:.2f}"]
    if result.detected_language:
        lang = result.detected_language
        lines.append(f"Language: {lang.name} ({lang.confidence:.2f})")
    if result.flags:
        lines.append(f"Flags: {', '.join(result.flags)}")
    if result.requires_review:
        lines.append("[yellow]Held for human review[/]")
    lines.append(f"Reason: {escape(result.reason)}")
    return "\n".join(lines)


# ── Batch ────────────────────────────────────────────────────────────


@main.command()
@click.argument("requests_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print results as a JSON list")
@click.pass_context
def batch(ctx: click.Context, requests_path: str, as_json: bool):
    """Moderate every request in a YAML or JSON file.

    The file holds a list of requests, or a mapping with a 'requests' list.
    Malformed entries are reported as invalid_input rather than aborting.
    """
    import yaml

    from faithscan.moderation.engine import ModerationDecisionEngine

    try:
        with open(requests_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        console.print(f"  [red]Failed to parse:[/] {escape(str(e))}")
        ctx.exit(1)

    if isinstance(data, dict):
        data = data.get("requests")
    if not isinstance(data, list):
        console.print("[red]Expected a list of requests.[/]")
        ctx.exit(1)

    registry, settings = _load(ctx)
    engine = ModerationDecisionEngine(registry, settings)
    results = [engine.moderate_payload(item) for item in data]

    if as_json:
        click.echo(json.dumps([r.to_dict() for r in results], ensure_ascii=False, indent=2))
        return

    table = Table(title=f"Moderation Results ({len(results)} requests)")
    table.add_column("#", style="dim", width=4)
    table.add_column("Title", style="cyan")
    table.add_column("Decision", justify="center")
    table.add_column("Confidence", justify="right")
    table.add_column("Language")
    table.add_column("Flags")

    for i, (item, result) in enumerate(zip(data, results)):
        title = item.get("title") if isinstance(item, dict) else None
        decision = "[green]approved[/]" if result.is_approved else "[red]rejected[/]"
        lang = result.detected_language.name if result.detected_language else "-"
        table.add_row(
            str(i + 1),
            escape(str(title)[:40]) if title is not None else "-",
            decision,
            f"{result.confidence:.2f}",
            lang,
            ", ".join(result.flags),
        )

    console.print(table)
    approved = sum(1 for r in results if r.is_approved)
    console.print(f"\n  {approved} approved, {len(results) - approved} rejected")


if __name__ == "__main__":
    main()
