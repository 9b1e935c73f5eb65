import logging
from typing import List, Optional, Tuple

import typer
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from catalog import Catalog
from config import settings
from errors import CatalogError
from schemas import MemberLoans
from utils.ui_helpers import (
    print_books,
    print_history,
    print_loans,
    print_members,
    print_message,
    print_result,
    print_stats,
    get_output_mode,
    set_output_mode,
)
from utils.validators import IDValidator, TextValidator

APP_NAME = settings.app_name

console = Console()
# Menus and prompts go here in json mode so stdout carries only JSON documents
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)

MenuItems = List[Tuple[str, str, str]]

def _configure_logging() -> None:
    # err_console looks up sys.stderr on each write
    handler = RichHandler(console=err_console, show_path=settings.debug)
    logging.basicConfig(level=settings.effective_log_level, format=settings.log_format, handlers=[handler])

# --- Typer CLI Application ---
app = typer.Typer(help="Library Catalog CLI", add_completion=False)

@app.callback(invoke_without_command=True)
def _global_options(
    ctx: typer.Context,
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default from DEFAULT_OUTPUT_MODE). In json mode menus and prompts go to stderr.",
    ),
):
    """Global CLI options. Starts the interactive menu when no command is given."""
    _configure_logging()
    if output and not set_output_mode(output):
        raise typer.BadParameter(f"Unknown output mode: {output}", param_hint="--output")
    if ctx.invoked_subcommand is None:
        run_menu(Catalog())

@app.command("menu")
def cli_menu():
    """Start the interactive menu on a fresh, empty catalog."""
    run_menu(Catalog())

@app.command("version")
def cli_version():
    """Show application name and version."""
    print(f"{settings.app_name} {settings.app_version}")

# --- Prompt helpers ---
def ui_console() -> Console:
    return err_console if get_output_mode() == "json" else console

def render_menu(title: str, items: MenuItems) -> None:
    table = Table.grid(padding=(0, 2))
    table.add_column(justify="right", style="bold cyan", width=4)
    table.add_column(justify="left", style="white")
    for key, label, icon in items:
        prefix = f"{icon} " if settings.show_emojis else ""
        table.add_row(f"[reverse]{key}[/]", f"{prefix}{label}")

    ui_console().print(Panel(table, title=title, border_style="cyan", box=box.HEAVY, padding=(1, 2)))

def ask_choice(items: MenuItems) -> str:
    return Prompt.ask("Select an option", choices=[key for key, _, _ in items], console=ui_console()).strip()

def ask_id(prompt: str) -> Optional[int]:
    """Ask for an id; report and return None when the input is not a positive integer."""
    raw = Prompt.ask(prompt, console=ui_console())
    value = IDValidator.parse_id(raw)
    if value is None:
        print_message(f"Invalid ID: '{raw}'.")
    return value

def ask_text(prompt: str) -> str:
    return Prompt.ask(prompt, console=ui_console())

# --- Book Manager ---
def view_books(catalog: Catalog) -> None:
    print_books([b.describe() for b in catalog.list_books()])

def add_book(catalog: Catalog) -> None:
    title = ask_text("Enter book title")
    if not TextValidator.validate_title(title):
        print_message("Title cannot be empty.", style="red")
        return
    author = ask_text("Enter author")
    if not TextValidator.validate_author(author):
        print_message("Author cannot be empty or numeric.", style="red")
        return
    print_result(catalog.add_book(title, author))

def edit_book(catalog: Catalog) -> None:
    if not catalog.list_books():
        print_message("No books available to edit.")
        return

    view_books(catalog)
    book_id = ask_id("Enter Book ID to edit")
    if book_id is None:
        return
    if catalog.find_book(book_id) is None:
        print_message(f"Book with ID {book_id} not found.")
        return

    new_title = ask_text("Enter new title (leave blank to keep current)")
    new_author = ask_text("Enter new author (leave blank to keep current)")
    print_result(catalog.edit_book(book_id, title=new_title, author=new_author))

def view_history(catalog: Catalog) -> None:
    book_id = ask_id("Enter Book ID to view borrow history")
    if book_id is None:
        return
    try:
        book = catalog.get_book(book_id)
        entries = catalog.borrow_history(book_id)
    except CatalogError as e:
        print_message(str(e))
        return
    print_history(book.describe(), entries)

def book_menu(catalog: Catalog) -> None:
    items = [
        ("1", "Add Book", "➕"),
        ("2", "Edit Book", "✏️"),
        ("3", "View Books", "📚"),
        ("4", "View Borrow History", "🕘"),
        ("0", "Back to Main Menu", "↩️"),
    ]
    actions = {"1": add_book, "2": edit_book, "3": view_books, "4": view_history}
    while True:
        render_menu("Book Management", items)
        choice = ask_choice(items)
        if choice == "0":
            return
        actions[choice](catalog)

# --- Member Manager ---
def view_members(catalog: Catalog) -> None:
    print_members([m.describe() for m in catalog.list_members()])

def add_member(catalog: Catalog) -> None:
    name = ask_text("Enter member name")
    if not TextValidator.validate_name(name):
        print_message("Name cannot be empty or numeric.", style="red")
        return
    print_result(catalog.add_member(name))

def edit_member(catalog: Catalog) -> None:
    if not catalog.list_members():
        print_message("No members available to edit.")
        return

    view_members(catalog)
    member_id = ask_id("Enter Member ID to edit")
    if member_id is None:
        return
    if catalog.find_member(member_id) is None:
        print_message(f"Member with ID {member_id} not found.")
        return

    new_name = ask_text("Enter new name (leave blank to keep current)")
    print_result(catalog.edit_member(member_id, name=new_name))

def member_menu(catalog: Catalog) -> None:
    items = [
        ("1", "Add Member", "➕"),
        ("2", "Edit Member", "✏️"),
        ("3", "View Members", "👥"),
        ("0", "Back to Main Menu", "↩️"),
    ]
    actions = {"1": add_member, "2": edit_member, "3": view_members}
    while True:
        render_menu("Member Management", items)
        choice = ask_choice(items)
        if choice == "0":
            return
        actions[choice](catalog)

# --- Borrow / Return ---
def _ask_book_and_member(catalog: Catalog, verb: str) -> Optional[Tuple[int, int]]:
    view_books(catalog)
    book_id = ask_id(f"Enter book ID to {verb}")
    if book_id is None:
        return None
    view_members(catalog)
    member_id = ask_id("Enter your member ID")
    if member_id is None:
        return None
    return book_id, member_id

def borrow_book(catalog: Catalog) -> None:
    ids = _ask_book_and_member(catalog, "borrow")
    if ids:
        print_result(catalog.borrow_book(*ids))

def return_book(catalog: Catalog) -> None:
    ids = _ask_book_and_member(catalog, "return")
    if ids:
        print_result(catalog.return_book(*ids))

def lending_menu(catalog: Catalog) -> None:
    items = [
        ("1", "Borrow Book", "📤"),
        ("2", "Return Book", "📥"),
        ("0", "Back to Main Menu", "↩️"),
    ]
    actions = {"1": borrow_book, "2": return_book}
    while True:
        render_menu("Borrow / Return", items)
        choice = ask_choice(items)
        if choice == "0":
            return
        actions[choice](catalog)

# --- Reports ---
def search_books(catalog: Catalog) -> None:
    keyword = ask_text("Enter search keyword")
    books = catalog.search_books(keyword)
    print_books([b.describe() for b in books], title="Search Results", empty_message="No books found.")

def members_with_books(catalog: Catalog) -> None:
    loans = [
        MemberLoans(member=member.describe(), books=[b.describe() for b in books])
        for member, books in catalog.members_with_borrowed_books()
    ]
    print_loans(loans)

def stats(catalog: Catalog) -> None:
    print_stats(catalog.get_statistics())

def run_menu(catalog: Catalog) -> None:
    """Interactive main menu driving the given catalog until the user exits."""
    items = [
        ("1", "Book Manager", "📚"),
        ("2", "Member Manager", "👥"),
        ("3", "Borrow / Return", "🔁"),
        ("4", "Search Books", "🔎"),
        ("5", "Members With Borrowed Books", "📋"),
        ("6", "Statistics", "📊"),
        ("0", "Exit", "🚪"),
    ]
    actions = {
        "1": book_menu,
        "2": member_menu,
        "3": lending_menu,
        "4": search_books,
        "5": members_with_books,
        "6": stats,
    }
    logger.debug("Menu started")
    try:
        while True:
            render_menu(APP_NAME, items)
            choice = ask_choice(items)
            if choice == "0":
                break
            actions[choice](catalog)
            ui_console().print()  # blank line between operations
    except (KeyboardInterrupt, EOFError):
        ui_console().print()
    ui_console().print("[green]Goodbye![/]")

if __name__ == "__main__":
    app()
