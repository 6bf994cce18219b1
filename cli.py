# cli.py
# Interactive catalog browser with category autocomplete.
import sys
from datetime import datetime
from decimal import Decimal
from typing import List, Dict, Any, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import IntPrompt, Confirm
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from sdk.catalogclient import CatalogClient, CatalogApiError, DEFAULT_BASE_URL

console = Console()
c = CatalogClient(base_url=DEFAULT_BASE_URL)


# Current filters and caches
status_message = "Ready"
filters: Dict[str, Any] = {"category": None, "search": None, "is_active": None}
category_cache: List[str] = []

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def format_price(price: Any) -> str:
    # str() of a JSON float keeps the digits the server sent
    return f"${Decimal(str(price)):,.2f}"


def format_stock(stock: int) -> str:
    if stock > 0:
        return f"{stock} in stock"
    return "[red]Out of stock[/red]"


def describe_filters(current: Dict[str, Any]) -> str:
    parts = []
    if current.get("category"):
        parts.append(f"category={current['category']}")
    if current.get("search"):
        parts.append(f"search='{current['search']}'")
    if current.get("is_active") is False:
        parts.append("inactive only")
    return ", ".join(parts) if parts else "none"


def show_products(products: List[Dict[str, Any]]):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(
        title=f"📦 Products ({len(products)})",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", width=6)
    table.add_column("Name", style="bold", width=30)
    table.add_column("Category", width=15)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Stock", justify="right", width=16)

    for p in products:
        name = p.get("name", "N/A")
        if not p.get("isActive", True):
            name += " [dim](inactive)[/dim]"
        table.add_row(
            str(p.get("id", "N/A")),
            name,
            p.get("category") or "-",
            format_price(p.get("price", 0)),
            format_stock(p.get("stock", 0)),
        )
    console.print(table)


def show_product_detail(p: Dict[str, Any]):
    lines = [
        f"[bold]{p.get('name')}[/bold]",
        p.get("description") or "[dim]No description[/dim]",
        "",
        f"Price: [green]{format_price(p.get('price', 0))}[/green]",
        f"Stock: {format_stock(p.get('stock', 0))}",
        f"Category: {p.get('category') or '-'}",
        f"Active: {'yes' if p.get('isActive') else 'no'}",
    ]
    if p.get("imageUrl"):
        lines.append(f"Image: [link={p['imageUrl']}]{p['imageUrl']}[/link]")
    lines.append(f"[dim]Created {p.get('createdAt')} · Updated {p.get('updatedAt')}[/dim]")
    console.print(Panel("\n".join(lines), title=f"ℹ️ Product #{p.get('id')}", border_style="cyan"))


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# API wrapper
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner.
    Returns the decoded result, or None after printing the error.
    """
    global status_message
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(description="Loading...", total=None)
            result = fn(*args, **kwargs)

        if success_msg:
            status_message = success_msg
        return result
    except CatalogApiError as e:
        if e.status_code == 0:
            status_message = f"Error: cannot reach {c.base_url} ({e.message})"
        else:
            status_message = f"Error: HTTP {e.status_code}: {e.message}"
        console.print(show_status(status_message, False))
        return None


def load_products():
    return try_api(
        c.list_products,
        filters["category"], filters["search"], filters["is_active"],
        success_msg=f"Filters: {describe_filters(filters)}",
    )


# ---------------------------
# Autocompletion helpers
# ---------------------------
def get_category_completer():
    global category_cache
    if not category_cache:
        category_cache = try_api(c.list_categories) or []
    return WordCompleter(category_cache, ignore_case=True, sentence=True)


def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


# ---------------------------
# Layout and Header
# ---------------------------
def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "🛍️ Product Catalog",
        f"[bold blue]{c.base_url}[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message, category_cache

    console.clear()
    console.print(create_header())

    category_cache = try_api(c.list_categories) or []
    products = load_products()
    if products is not None:
        show_products(products)

    while True:
        if status_message:
            console.print(show_status(status_message, "Error" not in status_message))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)

        show_inactive = filters["is_active"] is False
        options = [
            ("1", "📦 List products", "4", "👁️ " + ("Show active" if show_inactive else "Show inactive")),
            ("2", "🏷️ Filter by category", "5", "ℹ️ Product details"),
            ("3", "🔍 Search", "6", "🧹 Clear filters"),
            ("", "", "q", "👋 Quit")
        ]
        for row in options:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 7)] + ["q", "quit", "exit"])
        ).strip()

        refresh = False
        if choice == "1":
            refresh = True

        elif choice == "2":
            category = prompt_with_autocomplete(
                "Category (empty for all)", completer=get_category_completer()
            ).strip()
            filters["category"] = category or None
            refresh = True

        elif choice == "3":
            term = prompt_with_autocomplete("Search term (empty to clear)").strip()
            filters["search"] = term or None
            refresh = True

        elif choice == "4":
            filters["is_active"] = None if show_inactive else False
            refresh = True

        elif choice == "5":
            pid = IntPrompt.ask("Product ID")
            product = try_api(c.get_product, pid, success_msg=f"Product {pid} loaded")
            if product:
                show_product_detail(product)

        elif choice == "6":
            filters.update(category=None, search=None, is_active=None)
            category_cache = []
            refresh = True

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Bye! 👋[/bold green]", title="Goodbye"))
                sys.exit(0)

        if refresh:
            products = load_products()
            if products is not None:
                show_products(products)

        console.print()
        console.rule(style="dim")


def main():
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
