import asyncio
from pathlib import Path

from click import Choice, Context, argument, command, echo, option, pass_context, secho
from click import Path as ClickPath

from mdpress.content import ContentType
from mdpress.exceptions import MdpressError
from mdpress.site import Site


@command()
@argument("content_type", type=Choice([content_type.value for content_type in ContentType]))
@argument("slug")
@option(
    "--output",
    type=ClickPath(dir_okay=False, path_type=Path),
    default=None,
    help="Write the HTML fragment to this file instead of stdout",
)
@pass_context
def render(ctx: Context, content_type: str, slug: str, output: Path | None):
    """Render one content entry to HTML."""
    site = Site(ctx.obj["config"])

    try:
        page = asyncio.run(site.render_page(ContentType(content_type), slug))
    except MdpressError as e:
        secho(str(e), fg="red", err=True)
        ctx.exit(1)
    finally:
        site.close()

    if output is None:
        echo(page.html)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(page.html, encoding="utf-8")
    secho(f"Wrote {page.url} to {output}", fg="green")
