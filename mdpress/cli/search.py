from html import unescape
from re import split

from click import Context, argument, command, option, pass_context
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from mdpress.site import Site

console = Console()


def terminal_snippet(snippet: str) -> Text:
    """Convert an HTML snippet into rich text, marked terms in bold."""
    text = Text()
    for index, part in enumerate(split(r"</?mark>", snippet)):
        text.append(unescape(part), style="bold yellow" if index % 2 else "")
    return text


@command()
@argument("query")
@option("--limit", default=10, show_default=True, help="Maximum number of results")
@pass_context
def search(ctx: Context, query: str, limit: int):
    """Rebuild the search index and run a query against it."""
    site = Site(ctx.obj["config"])
    try:
        indexed = site.rebuild_search_index()
        results = site.search(query)
    finally:
        site.close()

    console.print(f"[dim]{indexed} documents indexed[/dim]")

    if not results:
        console.print(f"[yellow]No results for[/yellow] {escape(repr(query))}")
        return

    table = Table(show_header=True, header_style="bold blue")
    table.add_column("Score", justify="right")
    table.add_column("Type", style="dim")
    table.add_column("Title", style="cyan")
    table.add_column("Snippet")

    for result in results[:limit]:
        item = result.item
        table.add_row(
            str(result.score),
            item.type,
            escape(f"{item.emoji} {item.title}".strip()),
            terminal_snippet(result.snippet),
        )

    console.print(table)
