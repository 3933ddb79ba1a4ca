#!/usr/bin/env python3
"""
MLA Citation Generator - Build MLA 9th edition citations from the command line.

Usage:
    python mla_cite.py --type book --authors "Jane Doe" --title "The Book" --publisher ACME --year 2020
    python mla_cite.py --type journal --authors "A, B" --title T --container-title J --volume 3 --issue 2 --pages 10-20 --year 2021
    python mla_cite.py --batch citations.json --format json
    python mla_cite.py --interactive

Options:
    --format            Output format: full (default) or json
    --copy              Copy result to clipboard
"""

import sys
import argparse
import json
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.prompt import Prompt
from rich.markup import escape
from loguru import logger

from mla_citations.citation_record import CitationRecord, CitationType
from mla_citations.citation_list import CitationList
from mla_citations.clipboard import copy_to_clipboard
from mla_citations.logging_setup import init_from_config
from mla_citations.mla_formatter import format_citation

console = Console()

# Record fields settable from the command line
FIELD_OPTIONS = [
    'authors',
    'title',
    'publisher',
    'container_title',
    'volume',
    'issue',
    'pages',
    'url',
    'year',
]


def record_from_args(args: argparse.Namespace) -> CitationRecord:
    """Build a record from the one-shot field options."""
    values = {field: getattr(args, field) or "" for field in FIELD_OPTIONS}
    return CitationRecord(type=args.type, **values)


def load_batch(path: Path) -> List[CitationRecord]:
    """
    Load records from a JSON file holding one object or a list of objects.

    Raises:
        ValueError: If the file is not valid JSON or holds a bad record
    """
    try:
        data = json.loads(path.read_text(encoding='utf-8'))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e

    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON object or list in {path}")

    records = []
    for i, item in enumerate(data, 1):
        if not isinstance(item, dict):
            raise ValueError(f"Entry {i} in {path} is not an object")
        records.append(CitationRecord.from_dict(item))
    return records


def format_output(records: List[CitationRecord], output_format: str) -> str:
    if output_format == 'json':
        payload = [dict(record.to_dict(), citation=format_citation(record)) for record in records]
        return json.dumps(payload, indent=2)
    return '\n'.join(format_citation(record) for record in records)


def display_citations(citations: CitationList):
    if not len(citations):
        console.print("[yellow]No citations. Use /new to add one.[/yellow]")
        return

    table = Table(title="Citations", show_lines=True)
    table.add_column("ID", style="cyan", width=4)
    table.add_column("Type", style="magenta", width=8)
    table.add_column("Citation", style="white")

    copied = citations.copied_id
    for record in citations:
        text = escape(format_citation(record))
        if record.id == copied:
            text += " [green](Copied!)[/green]"
        table.add_row(str(record.id), record.type.value, text)

    console.print(table)


def _parse_id(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Citation id must be a number, got {value!r}")


def handle_command(citations: CitationList, line: str) -> bool:
    """
    Run one interactive command. Returns False when the session should end.

    Raises:
        KeyError: Unknown citation id
        ValueError: Bad arguments, field or type
    """
    # The value of /set is everything after the field name, taken as typed
    parts = line[1:].split(None, 3) if line.startswith('/') else []
    if not parts:
        console.print("[yellow]Commands start with '/'. Type /help for a list.[/yellow]")
        return True

    cmd, cmd_args = parts[0].lower(), parts[1:]

    if cmd in ('quit', 'q', 'exit'):
        console.print("[yellow]Goodbye![/yellow]")
        return False

    elif cmd == 'help':
        console.print("""
[bold]Commands:[/bold]
  /new \\[type]                - Add a citation (book, journal, website)
  /list                       - Show all citations
  /set <id> <field> <value>   - Set a field (authors, title, publisher,
                                container_title, volume, issue, pages, url, year)
  /type <id> <type>           - Change the source type
  /remove <id>                - Remove a citation
  /copy <id>                  - Copy a citation to the clipboard
  /help                       - Show this help
  /quit                       - Exit interactive mode
""")

    elif cmd == 'new':
        record = citations.add(cmd_args[0].lower() if cmd_args else None)
        console.print(f"[green]Added {record.type.value} citation {record.id}[/green]")

    elif cmd == 'list':
        display_citations(citations)

    elif cmd == 'set' and len(cmd_args) >= 2:
        citation_id = _parse_id(cmd_args[0])
        record = citations.update(citation_id, cmd_args[1], cmd_args[2] if len(cmd_args) > 2 else "")
        console.print(escape(format_citation(record)))

    elif cmd == 'type' and len(cmd_args) == 2:
        record = citations.update(_parse_id(cmd_args[0]), 'type', cmd_args[1].lower())
        console.print(escape(format_citation(record)))

    elif cmd == 'remove' and len(cmd_args) == 1:
        if citations.remove(_parse_id(cmd_args[0])):
            console.print(f"[green]Removed citation {escape(cmd_args[0])}[/green]")
        else:
            console.print(f"[red]No citation with id {escape(cmd_args[0])}[/red]")

    elif cmd == 'copy' and len(cmd_args) == 1:
        if citations.copy(_parse_id(cmd_args[0])):
            console.print("[dim green]✓ Copied![/dim green]")
        else:
            console.print("[yellow]Clipboard copy failed[/yellow]")

    else:
        console.print(f"[red]Unknown or incomplete command: /{escape(cmd)}. Type /help.[/red]")

    return True


def run_interactive_mode(citations: Optional[CitationList] = None):
    """Run in interactive REPL mode."""
    citations = citations if citations is not None else CitationList()

    console.print("\n[bold cyan]MLA 9th Edition Citation Generator[/bold cyan]")
    console.print("[dim]Commands: /new, /list, /set, /type, /remove, /copy, /help, /quit[/dim]\n")
    display_citations(citations)

    while True:
        try:
            user_input = Prompt.ask("[bold green]>[/bold green]").strip()
            if not user_input:
                continue
            if not handle_command(citations, user_input):
                break
        except (KeyError, ValueError) as e:
            message = e.args[0] if e.args else str(e)
            console.print(f"[red]Error: {escape(str(message))}[/red]")
        except (KeyboardInterrupt, EOFError):
            console.print("\n[yellow]Goodbye![/yellow]")
            break


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate MLA 9th edition citations for books, journal articles and websites",
    )

    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument('--batch', help='JSON file with one citation or a list of citations')
    mode_group.add_argument('--interactive', '-i', action='store_true',
                            help='Run in interactive mode (REPL)')

    parser.add_argument('--type', '-t', choices=[t.value for t in CitationType], default='book',
                        help='Source type (default: book)')
    parser.add_argument('--authors', '-a', help='Authors, separated by commas')
    parser.add_argument('--title')
    parser.add_argument('--publisher', help='Publisher (book)')
    parser.add_argument('--container-title', dest='container_title',
                        help='Journal title (journal) or website name (website)')
    parser.add_argument('--volume', help='Volume (journal)')
    parser.add_argument('--issue', help='Issue (journal)')
    parser.add_argument('--pages', help='Pages (journal)')
    parser.add_argument('--url', help='URL (website)')
    parser.add_argument('--year')

    parser.add_argument('--format', '-f', choices=['full', 'json'], default='full')
    parser.add_argument('--output', '-o', help='Output file (default: stdout)')
    parser.add_argument('--copy', '-c', action='store_true', help='Copy result to clipboard')
    parser.add_argument('--verbose', '-v', action='store_true', help='Verbose output')

    args = parser.parse_args(argv)

    init_from_config(verbose=args.verbose)

    if args.interactive:
        run_interactive_mode()
        return 0

    if args.batch:
        batch_file = Path(args.batch)
        if not batch_file.is_file():
            console.print(f"[red]Error: File not found: {escape(args.batch)}[/red]")
            return 1
        try:
            records = load_batch(batch_file)
        except (OSError, ValueError) as e:
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            return 1
    elif any(getattr(args, option) for option in FIELD_OPTIONS):
        records = [record_from_args(args)]
    else:
        parser.print_help()
        return 1

    output_text = format_output(records, args.format)
    logger.debug(f"Formatted {len(records)} citation(s)")

    if args.output:
        Path(args.output).write_text(output_text + '\n', encoding='utf-8')
        console.print(f"[green]Output written to: {args.output}[/green]")
    else:
        print(output_text)

    if args.copy and output_text.strip():
        if copy_to_clipboard(output_text.strip()):
            console.print("[green]Copied to clipboard[/green]")
        else:
            console.print("[yellow]Clipboard copy failed (no clipboard command available)[/yellow]")

    return 0


if __name__ == "__main__":
    sys.exit(main())
