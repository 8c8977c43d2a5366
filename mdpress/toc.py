from mdpress.highlight import escape_html
from mdpress.models import Heading

TOC_MIN_LEVEL = 2
TOC_MAX_LEVEL = 4


def toc_headings(headings: list[Heading]) -> list[Heading]:
    return [heading for heading in headings if TOC_MIN_LEVEL <= heading.level <= TOC_MAX_LEVEL]


def build_table_of_contents(headings: list[Heading], title: str) -> str:
    """
    Navigation block linking to the h2-h4 headings, indented by level. Returns
    an empty string when there is nothing to list.
    """
    entries = toc_headings(headings)
    if not entries:
        return ""

    items = []
    for heading in entries:
        indent = heading.level - TOC_MIN_LEVEL
        indent_class = f' class="toc-indent-{indent}"' if indent > 0 else ""
        items.append(
            f'<li{indent_class}><a href="#{heading.id}">{escape_html(heading.title)}</a></li>'
        )

    return (
        f'<nav class="toc"><div class="toc-title">{escape_html(title)}</div>'
        f'<ul>{"".join(items)}</ul></nav>'
    )
