from pathlib import Path

from click import Context, group, option, pass_context
from click import Path as ClickPath

from mdpress.cli.entries import list_entries
from mdpress.cli.render import render
from mdpress.cli.search import search
from mdpress.config import MdpressConfig


@group()
@option(
    "--content",
    type=ClickPath(file_okay=False, path_type=Path),
    default=None,
    help="Content root holding posts/, topics/, magazines/ and dictionary/",
)
@option(
    "--config",
    "config_file",
    type=ClickPath(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML configuration file",
)
@pass_context
def main(ctx: Context, content: Path | None, config_file: Path | None):
    """Main CLI entrypoint for mdpress."""
    overrides = {"content_dir": content.expanduser().absolute()} if content else {}
    ctx.obj = {"config": MdpressConfig(config_file=config_file, **overrides)}


main.add_command(render)
main.add_command(search)
main.add_command(list_entries)
