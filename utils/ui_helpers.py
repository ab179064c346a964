import os
import json
from typing import List, Any, Dict
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

_console = Console()

def set_output_mode(mode: str) -> bool:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode
        return True
    # Unknown values keep the current mode
    return False

def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, "plain").lower()
    return mode if mode in OUTPUT_MODES else "plain"

def print_books(books: List[Any], empty_message: str = "(No books)", title: str = "Books") -> None:
    """Print books in the current output mode.
    - plain: one display line per book, or the empty message
    - json: array of book dicts
    - rich: Rich table
    """
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
        return

    if not books:
        print(empty_message)
        return

    if mode == "rich":
        table = Table(title=f"📚 {title}", show_lines=True, header_style="bold cyan")
        table.add_column("ISBN", style="magenta", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        table.add_column("Issued", style="yellow")
        for b in books:
            issued = f"Yes (UserId={b.issued_to_user_id})" if b.issued else "No"
            table.add_row(b.isbn, b.title, b.author, issued)
        _console.print(table)
    else:
        for b in books:
            print(str(b))

def print_users(users: List[Any], empty_message: str = "(No users)") -> None:
    """Print users; plain mode adds an 'Issued books' line for anyone holding books."""
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps([u.to_dict() for u in users], ensure_ascii=False))
        return

    if not users:
        print(empty_message)
        return

    if mode == "rich":
        table = Table(title="👤 Users", show_lines=True, header_style="bold cyan")
        table.add_column("Id", style="magenta", justify="right")
        table.add_column("Name", style="white")
        table.add_column("Email", style="white")
        table.add_column("Issued books", style="yellow")
        for u in users:
            table.add_row(str(u.user_id), u.name, u.email, ", ".join(sorted(u.issued_books)))
        _console.print(table)
    else:
        for u in users:
            print(str(u))
            if u.issued_books:
                print(f"    Issued books: {', '.join(sorted(u.issued_books))}")

def print_stats(stats: Dict[str, Any]) -> None:
    """Print library statistics in the current output mode."""
    mode = get_output_mode()

    if not stats:
        print("No statistics available.")
        return

    if mode == "json":
        print(json.dumps(stats, ensure_ascii=False))
    elif mode == "rich":
        content = (
            f"[bold]Total Books:[/] {stats.get('total_books', 0)}\n"
            f"[bold]Available Books:[/] {stats.get('available_books', 0)}\n"
            f"[bold]Issued Books:[/] {stats.get('issued_books', 0)}\n"
            f"[bold]Total Users:[/] {stats.get('total_users', 0)}"
        )
        _console.print(Panel.fit(content, title="📊 Stats", border_style="blue"))
    else:
        print(f"Total Books: {stats.get('total_books', 0)}")
        print(f"Available Books: {stats.get('available_books', 0)}")
        print(f"Issued Books: {stats.get('issued_books', 0)}")
        print(f"Total Users: {stats.get('total_users', 0)}")
