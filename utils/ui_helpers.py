import os
import json
from typing import List, Sequence
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

from config import settings
from schemas import BookInfo, CatalogStats, HistoryEntry, MemberInfo, MemberLoans, OperationResult, ResultStatus

# Environment variable to control CLI output mode
# Allowed values: 'plain', 'json', 'rich' (default comes from settings)
OUTPUT_MODE_ENV = "CATALOG_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

_console = Console()

def set_output_mode(mode: str) -> bool:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode
        return True
    # Invalid values are ignored; the current mode stays in effect
    return False

def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, settings.default_output_mode).lower()
    return mode if mode in OUTPUT_MODES else "plain"

def _icon(symbol: str) -> str:
    return f"{symbol} " if settings.show_emojis else ""

def _dump(models: Sequence) -> None:
    print(json.dumps([m.model_dump(mode="json") for m in models], ensure_ascii=False))

def format_book_line(book: BookInfo) -> str:
    return f"Book ID: {book.id}, Title: {book.title}, Author: {book.author}, Status: {book.status}"

def format_member_line(member: MemberInfo) -> str:
    return f"Member ID: {member.id}, Name: {member.name}"

def print_books(books: List[BookInfo], title: str = "Library Books", empty_message: str = "No books in library.") -> None:
    """Print books according to the current output mode.
    - plain: one 'Book ID: .., Title: .., Author: .., Status: ..' line per book
    - json: JSON array of BookInfo
    - rich: Rich table
    """
    mode = get_output_mode()

    if mode == "json":
        _dump(books)
        return

    if not books:
        print(empty_message)
        return

    if mode == "rich":
        table = Table(title=f"{_icon('📚')}{title}", show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        table.add_column("Status", style="white")
        for b in books:
            status = "[green]Available[/]" if b.available else f"[yellow]Borrowed by {escape(b.borrower_name or '')}[/]"
            table.add_row(str(b.id), escape(b.title), escape(b.author), status)
        _console.print(table)
    else:
        print(f"{title}:")
        for b in books:
            print(format_book_line(b))

def print_members(members: List[MemberInfo], title: str = "Library Members") -> None:
    mode = get_output_mode()

    if mode == "json":
        _dump(members)
        return

    if not members:
        print("No members in library.")
        return

    if mode == "rich":
        table = Table(title=f"{_icon('👥')}{title}", show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True)
        table.add_column("Name", style="white")
        table.add_column("Borrowed", style="white", justify="right")
        for m in members:
            table.add_row(str(m.id), escape(m.name), str(len(m.borrowed_book_ids)))
        _console.print(table)
    else:
        print(f"{title}:")
        for m in members:
            print(format_member_line(m))

def print_history(book: BookInfo, entries: List[HistoryEntry]) -> None:
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps({
            "book": book.model_dump(mode="json"),
            "history": [e.model_dump(mode="json") for e in entries],
        }, ensure_ascii=False))
        return

    if mode == "rich":
        if not entries:
            _console.print(f"[yellow]No borrow history for '{escape(book.title)}'.[/]")
            return
        table = Table(title=f"{_icon('🕘')}Borrow history for '{escape(book.title)}'", header_style="bold cyan")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Member", style="white")
        table.add_column("Member ID", style="magenta")
        for i, e in enumerate(entries, 1):
            table.add_row(str(i), escape(e.member_name), str(e.member_id))
        _console.print(table)
    else:
        print(f"Borrow history for '{book.title}':")
        if not entries:
            print("No borrow history.")
        for e in entries:
            print(f"- {e.member_name} (Member ID: {e.member_id})")

def print_loans(loans: List[MemberLoans]) -> None:
    """Print every member currently holding books, with the books they hold."""
    mode = get_output_mode()

    if mode == "json":
        _dump(loans)
        return

    if mode == "rich":
        if not loans:
            _console.print("[yellow]No members have borrowed books.[/]")
            return
        for loan in loans:
            lines = "\n".join(
                f"[magenta]{b.id}[/] {escape(b.title)} - {escape(b.author)}" for b in loan.books
            )
            _console.print(Panel.fit(
                lines,
                title=f"{_icon('👤')}{escape(loan.member.name)} (ID: {loan.member.id})",
                border_style="cyan",
            ))
    else:
        print("Members with Borrowed Books:")
        if not loans:
            print("None.")
        for loan in loans:
            print(format_member_line(loan.member))
            for b in loan.books:
                print(f"  - Book ID: {b.id}, Title: {b.title}, Author: {b.author}")

def print_result(result: OperationResult) -> None:
    mode = get_output_mode()

    if mode == "json":
        print(result.model_dump_json())
    elif mode == "rich":
        style = {
            ResultStatus.OK: "green",
            ResultStatus.REJECTED: "yellow",
            ResultStatus.NOT_FOUND: "yellow",
            ResultStatus.INVALID_ARGUMENT: "red",
        }[result.status]
        icon = _icon("✅") if result.ok else _icon("⚠️")
        _console.print(f"[{style}]{icon}{escape(result.message)}[/]")
    else:
        print(result.message)

def print_message(message: str, style: str = "yellow") -> None:
    """Print a CLI-side notice (invalid input, empty catalog) in the current mode."""
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps({"message": message}, ensure_ascii=False))
    elif mode == "rich":
        _console.print(f"[{style}]{escape(message)}[/]")
    else:
        print(message)

def print_stats(stats: CatalogStats) -> None:
    """Print statistics according to the current output mode."""
    mode = get_output_mode()

    if mode == "json":
        print(stats.model_dump_json())
    elif mode == "rich":
        content = (
            f"[bold]Total Books:[/] {stats.total_books}\n"
            f"[bold]Available:[/] {stats.available_books}\n"
            f"[bold]Borrowed:[/] {stats.borrowed_books}\n"
            f"[bold]Members:[/] {stats.total_members}\n"
            f"[bold]Members With Loans:[/] {stats.members_with_loans}\n"
            f"[bold]Unique Authors:[/] {stats.unique_authors}"
        )
        _console.print(Panel.fit(content, title=f"{_icon('📊')}Stats", border_style="blue"))
    else:
        print(f"Total Books: {stats.total_books}")
        print(f"Available Books: {stats.available_books}")
        print(f"Borrowed Books: {stats.borrowed_books}")
        print(f"Total Members: {stats.total_members}")
        print(f"Members With Loans: {stats.members_with_loans}")
        print(f"Unique Authors: {stats.unique_authors}")
