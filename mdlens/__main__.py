"""CLI entry point: python -m mdlens {inspect,validate,list,export} [options]"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import yaml
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table

from mdlens import settings
from mdlens.export import to_jsonl
from mdlens.extractors.dates import format_date, time_ago
from mdlens.extractors.paths import group_paths_by_directory, sort_paths_by_date
from mdlens.extractors.validation import validate_markdown
from mdlens.items import DocumentSchema
from mdlens.profiles import load_profile
from mdlens.query import LoadError, find_markdown_files, load

logger = logging.getLogger(__name__)

_DATE_STYLES = ("short", "medium", "long", "full", "iso")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdlens",
        description=(
            "Extract metadata and structure from markdown documents.\n"
            "Headings, links, images, code blocks, dates, reading time, validation."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        metavar="{DEBUG,INFO,WARNING,ERROR}",
                        help="Logging level (default: WARNING)")
    parser.add_argument("--profile", default=None, metavar="FILE",
                        help="YAML profile with per-directory overrides")
    parser.add_argument("--wpm", type=int, default=None, metavar="N",
                        help=f"Reading speed in words per minute (default: {settings.WORDS_PER_MINUTE})")
    parser.add_argument("--max-level", type=int, default=None, choices=range(1, 7),
                        metavar="{1..6}",
                        help=f"Deepest heading level to report (default: {settings.MAX_HEADING_LEVEL})")
    parser.add_argument("--date-style", default=None, choices=_DATE_STYLES,
                        metavar="{short,medium,long,full,iso}",
                        help=f"Date display style (default: {settings.DATE_STYLE})")

    sub = parser.add_subparsers(dest="command", required=True)

    inspect_cmd = sub.add_parser("inspect", help="Show everything extracted from one file")
    inspect_cmd.add_argument("file", metavar="FILE")
    inspect_cmd.add_argument("--json", action="store_true", default=False,
                             help="Print the document as JSON")

    validate = sub.add_parser("validate", help="Validate one or more files")
    validate.add_argument("files", nargs="+", metavar="FILE")
    validate.add_argument("--json", action="store_true", default=False,
                          help="Print the reports as JSON")

    listing = sub.add_parser("list", help="List markdown files grouped by directory")
    listing.add_argument("root", metavar="DIR")
    listing.add_argument("--order", choices=["asc", "desc"], default="desc",
                         help="Date order inside each directory (default: desc)")

    export = sub.add_parser("export", help="Write every markdown file under DIR as JSONL")
    export.add_argument("root", metavar="DIR")
    export.add_argument("--out", required=True, metavar="FILE",
                        help="Output JSONL file")
    return parser


# ---------------------------------------------------------------------------
# Option resolution
# ---------------------------------------------------------------------------

def _options_for(args: argparse.Namespace, file_path: str) -> dict[str, Any]:
    """Merge settings defaults, the profile entry for *file_path*, and CLI flags."""
    options: dict[str, Any] = {
        "words_per_minute": settings.WORDS_PER_MINUTE,
        "max_heading_level": settings.MAX_HEADING_LEVEL,
        "date_style": settings.DATE_STYLE,
    }
    if args.profile:
        profile = load_profile(args.profile, file_path)
        options.update({k: v for k, v in profile.items() if k in options})
    if args.wpm is not None:
        options["words_per_minute"] = args.wpm
    if args.max_level is not None:
        options["max_heading_level"] = args.max_level
    if args.date_style is not None:
        options["date_style"] = args.date_style
    return options


def _load(args: argparse.Namespace, file_path: str) -> tuple[DocumentSchema, dict[str, Any]]:
    options = _options_for(args, file_path)
    doc = load(
        file_path,
        words_per_minute=options["words_per_minute"],
        max_heading_level=options["max_heading_level"],
    )
    return doc, options


def _display_date(value: Any, style: str) -> str:
    if value is None:
        return "-"
    return f"{format_date(value, style)} ({time_ago(value)})"


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def _cmd_inspect(args: argparse.Namespace, console: Console) -> int:
    doc, options = _load(args, args.file)
    if args.json:
        print(doc.to_json(indent=2))
        return 0

    style = options["date_style"]
    console.print(
        Panel.fit(
            f"[bold cyan]{escape(doc.title or '(untitled)')}[/bold cyan]\n"
            f"Path:           [green]{escape(doc.path)}[/green]\n"
            f"Slug:           {doc.slug or '-'}\n"
            f"Words:          {doc.word_count:,}\n"
            f"Reading time:   {doc.reading_time_minutes} min\n"
            f"Created:        {_display_date(doc.created_at, style)}\n"
            f"Updated:        {_display_date(doc.updated_at, style)}\n"
            f"Last modified:  {_display_date(doc.last_modified, style)}",
            border_style="cyan",
            title="[bold]Document[/bold]",
        ),
    )
    if doc.summary:
        console.print(f"[dim]{escape(doc.summary)}[/dim]")

    if doc.headings:
        tbl = Table(title="Headings", box=box.SIMPLE_HEAVY)
        tbl.add_column("Level", justify="right", width=5)
        tbl.add_column("Text", style="cyan")
        tbl.add_column("Anchor", style="dim")
        for heading in doc.headings:
            tbl.add_row(str(heading.level), "  " * (heading.level - 1) + heading.text, heading.anchor)
        console.print(tbl)

    if doc.links or doc.images:
        tbl = Table(title="Links & images", box=box.SIMPLE_HEAVY)
        tbl.add_column("Kind", style="dim", width=6)
        tbl.add_column("Text", style="cyan", max_width=40)
        tbl.add_column("Target", style="blue")
        for link in doc.links:
            tbl.add_row("link", link.text, link.url)
        for image in doc.images:
            tbl.add_row("image", image.alt, image.src)
        console.print(tbl)

    if doc.code_blocks:
        console.print(
            "Code blocks: "
            + ", ".join(f"{block.language} ({len(block.content.splitlines())} lines)"
                        for block in doc.code_blocks),
        )
    return 0


def _cmd_validate(args: argparse.Namespace, console: Console) -> int:
    exit_code = 0
    payload: list[dict[str, Any]] = []
    for file_path in args.files:
        try:
            text = Path(file_path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            print(f"ERROR: Could not read {file_path}: {exc}", file=sys.stderr)
            exit_code = 1
            continue

        report = validate_markdown(text)
        if not report.is_valid:
            exit_code = 1
        if args.json:
            payload.append({"path": file_path, **report.to_dict()})
            continue

        status = "[green]valid[/green]" if report.is_valid else "[red]invalid[/red]"
        console.print(Rule(f"{escape(file_path)}  {status}"))
        for error in report.errors:
            console.print(f"  [red]error[/red]    {error}")
        for warning in report.warnings:
            console.print(f"  [yellow]warning[/yellow]  {warning}")
        stats = report.stats
        console.print(
            f"  [dim]{stats.word_count} words, {stats.heading_count} headings, "
            f"{stats.link_count} links, {stats.image_count} images[/dim]",
        )

    if args.json:
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    return exit_code


def _cmd_list(args: argparse.Namespace, console: Console) -> int:
    files = find_markdown_files(args.root)
    if not files:
        print(f"ERROR: No markdown files under {args.root}", file=sys.stderr)
        return 1

    for directory, paths in group_paths_by_directory(files).items():
        tbl = Table(
            title=f"[bold]{escape(directory)}[/bold] ({len(paths)})",
            box=box.SIMPLE_HEAVY,
            title_justify="left",
        )
        tbl.add_column("#", style="dim", justify="right", width=4, no_wrap=True)
        tbl.add_column("Title", style="cyan", max_width=48, no_wrap=True)
        tbl.add_column("Date", style="yellow", width=14, no_wrap=True)
        tbl.add_column("Words", justify="right", width=7, no_wrap=True)
        tbl.add_column("Read", justify="right", width=6, no_wrap=True)
        tbl.add_column("File", style="blue", no_wrap=True)

        for i, file_path in enumerate(sort_paths_by_date(paths, args.order), 1):
            try:
                doc, options = _load(args, file_path)
            except LoadError as exc:
                logger.warning("Skipping %s: %s", exc.path, exc)
                continue
            date_value = doc.last_modified
            tbl.add_row(
                str(i),
                escape(doc.title or "-"),
                format_date(date_value, options["date_style"]) if date_value else "-",
                str(doc.word_count),
                f"{doc.reading_time_minutes} min",
                file_path.rsplit("/", 1)[-1],
            )
        console.print(tbl)
    return 0


def _cmd_export(args: argparse.Namespace, console: Console) -> int:
    documents: list[DocumentSchema] = []
    for file_path in find_markdown_files(args.root):
        try:
            doc, _ = _load(args, file_path)
        except LoadError as exc:
            logger.warning("Skipping %s: %s", exc.path, exc)
            continue
        documents.append(doc)

    total = to_jsonl(documents, args.out)
    console.print(f"Wrote [green]{total}[/green] document(s) to [yellow]{args.out}[/yellow]")
    return 0


_COMMANDS = {
    "inspect": _cmd_inspect,
    "validate": _cmd_validate,
    "list": _cmd_list,
    "export": _cmd_export,
}


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.wpm is not None and args.wpm <= 0:
        print("ERROR: --wpm must be a positive integer", file=sys.stderr)
        return 1

    console = Console()
    try:
        return _COMMANDS[args.command](args, console)
    except LoadError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    except (OSError, ValueError, yaml.YAMLError) as exc:
        # Bad profile file or a profile value the extractors reject.
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
