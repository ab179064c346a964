import logging
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from config import settings
from minilib import Book, Library, User, load_sample_data
from utils.ui_helpers import set_output_mode, print_books, print_users, print_stats
from utils.validators import TextValidator, parse_user_id

APP_NAME = settings.app_name

console = Console()
logger = logging.getLogger(__name__)


def _echo(text: str = "", style: Optional[str] = None) -> None:
    # Domain text may contain brackets; never treat it as markup or wrap it
    console.print(text, style=style, markup=False, highlight=False, soft_wrap=True)


def build_library(with_sample_data: bool = True) -> Library:
    """Create the Library used for this run, optionally seeded with the demo catalog."""
    lib = Library()
    if with_sample_data:
        load_sample_data(lib)
    return lib


def _library(ctx: typer.Context) -> Library:
    lib = ctx.obj
    if lib is None:
        lib = ctx.obj = build_library(settings.load_sample_data)
    return lib


# --- Typer CLI application ---
app = typer.Typer(help="Mini Library CLI")

@app.callback(invoke_without_command=True)
def _global_options(
    ctx: typer.Context,
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
    sample_data: bool = typer.Option(
        settings.load_sample_data,
        "--sample-data/--no-sample-data",
        help="Seed the catalog with the demo books and users",
    ),
):
    """Global options; without a subcommand the interactive menu starts."""
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if output and not set_output_mode(output):
        logger.warning("Unknown output mode %r, keeping the current one", output)
    ctx.obj = build_library(sample_data)
    if ctx.invoked_subcommand is None:
        run_menu(ctx.obj)

@app.command("list")
def cli_list(
    ctx: typer.Context,
    available: bool = typer.Option(False, "--available", "-a", help="Only books that are not issued"),
):
    """List all books (or only available ones), sorted by title."""
    lib = _library(ctx)
    if available:
        print_books(lib.list_available_books(), empty_message="(No available books)", title="Available books")
    else:
        print_books(lib.list_all_books())

@app.command("users")
def cli_users(ctx: typer.Context):
    """List all users, sorted by name."""
    print_users(_library(ctx).list_all_users())

@app.command("search")
def cli_search(ctx: typer.Context, query: str = typer.Argument(..., help="Part of the title")):
    """Search books by title (case-insensitive)."""
    print_books(_library(ctx).search_by_title(query), empty_message="(No matches)", title=f"Results for '{query}'")

@app.command("show")
def cli_show(ctx: typer.Context, isbn: str):
    """Show the details of one book."""
    for line in _book_details(_library(ctx), isbn.strip()):
        print(line)

@app.command("stats")
def cli_stats(ctx: typer.Context):
    """Show library statistics."""
    print_stats(_library(ctx).get_statistics())


def _book_details(lib: Library, isbn: str) -> list:
    book = lib.get_book_by_isbn(isbn)
    if book is None:
        return ["Book not found."]
    lines = [str(book)]
    if book.issued:
        holder = lib.get_user_by_id(book.issued_to_user_id)
        who = f"{holder.name} (ID={holder.user_id})" if holder else f"User ID {book.issued_to_user_id}"
        lines.append(f"  Issued to: {who}")
    return lines


# --- Interactive menu ---
def _print_listing(header: str, items: list, empty: str) -> None:
    _echo()
    _echo(header, style="bold")
    if not items:
        _echo(f"  {empty}")
    for item in items:
        _echo(f"  {item}")

def list_all_books(lib: Library) -> None:
    _print_listing("All books:", lib.list_all_books(), "(No books)")

def list_available_books(lib: Library) -> None:
    _print_listing("Available books:", lib.list_available_books(), "(No available books)")

def list_all_users(lib: Library) -> None:
    users = lib.list_all_users()
    _echo()
    _echo("Users:", style="bold")
    if not users:
        _echo("  (No users)")
    for user in users:
        _echo(f"  {user}")
        if user.issued_books:
            _echo(f"    Issued books: {', '.join(sorted(user.issued_books))}")

def issue_book(lib: Library) -> None:
    isbn = Prompt.ask("Enter ISBN to issue", console=console).strip()
    try:
        user_id = parse_user_id(Prompt.ask("Enter User ID", console=console))
    except ValueError as e:
        _echo(str(e), style="red")
        return
    result = lib.issue_book(isbn, user_id)
    _echo(str(result), style="green" if result.ok else "yellow")

def return_book(lib: Library) -> None:
    isbn = Prompt.ask("Enter ISBN to return", console=console).strip()
    try:
        user_id = parse_user_id(Prompt.ask("Enter User ID", console=console))
    except ValueError as e:
        _echo(str(e), style="red")
        return
    result = lib.return_book(isbn, user_id)
    _echo(str(result), style="green" if result.ok else "yellow")

def search_books(lib: Library) -> None:
    query = Prompt.ask("Enter title keyword", console=console).strip()
    _print_listing("Search results:", lib.search_by_title(query), "(No matches)")

def add_book(lib: Library) -> None:
    isbn = Prompt.ask("Enter ISBN", console=console).strip()
    title = Prompt.ask("Enter title", console=console).strip()
    author = Prompt.ask("Enter author", console=console).strip()
    missing = TextValidator.missing_fields(ISBN=isbn, title=title, author=author)
    if missing:
        _echo(f"Book not added, missing: {', '.join(missing)}.", style="red")
        return
    ok = lib.add_book(Book(isbn, title, author))
    _echo("Book added." if ok else "Book with same ISBN already exists.", style="green" if ok else "yellow")

def add_user(lib: Library) -> None:
    try:
        user_id = parse_user_id(Prompt.ask("Enter user id (integer)", console=console))
    except ValueError as e:
        _echo(str(e), style="red")
        return
    name = Prompt.ask("Enter name", console=console).strip()
    email = Prompt.ask("Enter email", console=console).strip()
    missing = TextValidator.missing_fields(name=name, email=email)
    if missing:
        _echo(f"User not added, missing: {', '.join(missing)}.", style="red")
        return
    ok = lib.add_user(User(user_id, name, email))
    _echo("User added." if ok else "User with same id already exists.", style="green" if ok else "yellow")

def show_book_details(lib: Library) -> None:
    isbn = Prompt.ask("Enter ISBN", console=console).strip()
    for line in _book_details(lib, isbn):
        _echo(line)


MENU_ITEMS = [
    ("1", "List all books", "📚", list_all_books),
    ("2", "List available books", "📗", list_available_books),
    ("3", "List all users", "👤", list_all_users),
    ("4", "Issue a book", "📤", issue_book),
    ("5", "Return a book", "📥", return_book),
    ("6", "Search books by title", "🔎", search_books),
    ("7", "Add a new book", "➕", add_book),
    ("8", "Add a new user", "🙋", add_user),
    ("9", "Show book details (by ISBN)", "ℹ️", show_book_details),
    ("0", "Exit", "🚪", None),
]

def render_menu() -> None:
    table = Table.grid(padding=(0, 2))
    table.add_column(justify="right", style="bold cyan", width=4)
    table.add_column(justify="left", style="white")
    for key, label, icon, _ in MENU_ITEMS:
        table.add_row(f"[reverse]{key}[/]", f"{icon} {label}")

    console.print(Panel(table, title="Menu", border_style="cyan", box=box.HEAVY, padding=(1, 2)))

def run_menu(lib: Library) -> None:
    """Interactive menu loop over ``lib`` until the user picks 0 or input ends."""
    handlers = {key: handler for key, _, _, handler in MENU_ITEMS}
    _echo(f"=== {APP_NAME} ===", style="bold")
    while True:
        render_menu()
        try:
            choice = Prompt.ask("Choose", choices=list(handlers), show_choices=False, console=console).strip()
            handler = handlers[choice]
            if handler is None:
                break
            handler(lib)
        except (EOFError, KeyboardInterrupt):
            _echo()
            break
    _echo("Exiting. Goodbye!")


if __name__ == "__main__":
    app()
