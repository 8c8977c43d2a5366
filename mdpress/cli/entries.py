from click import Choice, Context, argument, command, option, pass_context
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mdpress.content import ContentStore, ContentType

console = Console()


@command(name="list")
@argument("content_type", type=Choice([content_type.value for content_type in ContentType]))
@option("--all", "show_all", is_flag=True, default=False, help="Include unlisted entries")
@pass_context
def list_entries(ctx: Context, content_type: str, show_all: bool):
    """List the entries of one content type, newest first."""
    store = ContentStore(ctx.obj["config"].content_dir)
    entries = store.list_entries(ContentType(content_type), only_listed=not show_all)

    if not entries:
        console.print(f"[yellow]No {content_type} found in[/yellow] {escape(str(store.root))}")
        return

    table = Table(show_header=True, header_style="bold blue")
    table.add_column("Date", style="dim")
    table.add_column("Slug", style="cyan")
    table.add_column("Title")
    table.add_column("Listed", justify="center")

    for entry in entries:
        table.add_row(
            entry.date,
            entry.slug,
            escape(f"{entry.emoji} {entry.title}"),
            "✓" if entry.listed else "✗",
        )

    console.print(table)
