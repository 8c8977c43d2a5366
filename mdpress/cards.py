"""HTML builders for the block level constructs protected by placeholders."""

from urllib.parse import urlparse

from mdpress.config import RenderLabels
from mdpress.highlight import escape_html
from mdpress.models import (
    DictionaryEntrySummary,
    MagazineSummary,
    PostSummary,
)

CALLOUT_STYLES = {
    "NOTE": ("ℹ️", "callout-note"),
    "TIP": ("💡", "callout-tip"),
    "IMPORTANT": ("❗", "callout-important"),
    "WARNING": ("⚠️", "callout-warning"),
    "CAUTION": ("🔴", "callout-caution"),
}


def code_block(highlighted: str, language: str, labels: RenderLabels) -> str:
    language = escape_html(language)
    return f"""
<div class="code-block">
  <div class="code-header">
    <span class="code-language">{language}</span>
    <button class="copy-button">{labels.copy_button}</button>
  </div>
  <pre><code class="language-{language}">{highlighted}</code></pre>
</div>"""


def callout(callout_type: str, content: str, labels: RenderLabels) -> str:
    """Wrap already rendered HTML in a callout box. Unknown types look like NOTE."""
    callout_type = callout_type.upper()
    if callout_type not in CALLOUT_STYLES:
        callout_type = "NOTE"
    icon, class_name = CALLOUT_STYLES[callout_type]
    label = labels.callouts.get(callout_type, callout_type.title())

    return f"""
<div class="callout {class_name}">
  <div class="callout-header">
    <span class="callout-icon">{icon}</span>
    <span class="callout-label">{label}</span>
  </div>
  <div class="callout-content">{content}</div>
</div>"""


def callout_too_deep(raw_content: str, labels: RenderLabels) -> str:
    return f"""
<div class="callout callout-note callout-too-deep">
  <div class="callout-header">
    <span class="callout-label">{labels.nesting_too_deep}</span>
  </div>
  <pre class="callout-content">{escape_html(raw_content)}</pre>
</div>"""


def bookmark(content: str) -> str:
    """
    Build a link card from the body of a `:::bookmark` block. The body holds
    a bare URL plus optional `title:` and `icon:` lines in any order.
    """
    url = ""
    title = ""
    icon = "🔗"

    for line in content.split("\n"):
        line = line.strip()
        if line.startswith(("http://", "https://")):
            url = line
        elif line.startswith("title:"):
            title = line[len("title:") :].strip()
        elif line.startswith("icon:"):
            icon = line[len("icon:") :].strip()

    if not title:
        title = _hostname(url) or url

    return f"""
<a href="{escape_html(url)}" class="bookmark-card" target="_blank" rel="noopener noreferrer">
  <div class="bookmark-icon">{icon}</div>
  <div class="bookmark-content">
    <div class="bookmark-title">{escape_html(title)}</div>
    <div class="bookmark-url">{escape_html(url)}</div>
  </div>
  <div class="bookmark-arrow">→</div>
</a>"""


def _hostname(url: str) -> str | None:
    try:
        return urlparse(url).hostname
    except ValueError:
        return None


def not_found(kind: str, slug: str, title: str) -> str:
    return f"""
<div class="{kind}-card {kind}-card-notfound">
  <div class="{kind}-card-icon">❌</div>
  <div class="{kind}-card-content">
    <div class="{kind}-card-title">{escape_html(title)}</div>
    <div class="{kind}-card-meta">{escape_html(slug)}</div>
  </div>
</div>"""


def article(slug: str, post: PostSummary | None, labels: RenderLabels) -> str:
    if post is None:
        return not_found("article", slug, labels.article_not_found)

    tags = ""
    if post.tags:
        tags = (
            '<div class="tags tags-small">'
            + "".join(f'<span class="tag">{escape_html(tag)}</span>' for tag in post.tags)
            + "</div>"
        )

    # Prefer the one line summary, fall back to the date
    if post.quicklook:
        subtitle = f'<span class="article-quicklook">{escape_html(post.quicklook)}</span>'
    else:
        subtitle = f"<time>{escape_html(post.date)}</time>"

    return f"""
<a href="/posts/{escape_html(post.slug)}" class="article-card">
  <div class="article-card-icon">{escape_html(post.emoji)}</div>
  <div class="article-card-content">
    <div class="article-card-title">{escape_html(post.title)}</div>
    <div class="article-card-meta">
      {subtitle}
      {tags}
    </div>
  </div>
  <div class="article-card-arrow">→</div>
</a>"""


def magazine(slug: str, entry: MagazineSummary | None, labels: RenderLabels) -> str:
    if entry is None:
        return not_found("magazine", slug, labels.magazine_not_found)

    count = labels.magazine_article_count.format(count=len(entry.articles))
    return f"""
<a href="/magazines/{escape_html(entry.slug)}" class="magazine-card">
  <div class="magazine-card-icon">{escape_html(entry.emoji)}</div>
  <div class="magazine-card-content">
    <div class="magazine-card-title">{escape_html(entry.title)}</div>
    <div class="magazine-card-meta">
      <span class="magazine-card-description">{escape_html(entry.description)}</span>
      <span class="magazine-card-count">{escape_html(count)}</span>
    </div>
  </div>
  <div class="magazine-card-arrow">→</div>
</a>"""


def dictionary(slug: str, entry: DictionaryEntrySummary | None, labels: RenderLabels) -> str:
    if entry is None:
        return not_found("dictionary", slug, labels.dictionary_not_found)

    reading = ""
    if entry.reading:
        reading = f'<div class="dictionary-card-reading">{escape_html(entry.reading)}</div>'

    return f"""
<a href="/dictionary/{escape_html(entry.slug)}" class="dictionary-card">
  <div class="dictionary-card-badge">{labels.dictionary_badge}</div>
  <div class="dictionary-card-body">
    <div class="dictionary-card-icon">{escape_html(entry.emoji)}</div>
    <div class="dictionary-card-content">
      <div class="dictionary-card-title">{escape_html(entry.title)}</div>
      {reading}
      <div class="dictionary-card-desc">{escape_html(entry.description)}</div>
    </div>
    <div class="dictionary-card-arrow">→</div>
  </div>
</a>"""
