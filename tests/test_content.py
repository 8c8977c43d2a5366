"""Tests for the file-backed content store."""

import pytest

from mdpress.content import ContentStore, ContentType, summarize, validate_slug
from mdpress.exceptions import ContentNotFoundError, InvalidSlugError, MdpressError
from mdpress.models import DictionaryEntrySummary, MagazineSummary, PostSummary


@pytest.fixture
def store(tmp_path):
    store = ContentStore(tmp_path)
    store.save(
        ContentType.POSTS,
        "older",
        {"title": "Older Post", "date": "2023-05-01", "tags": ["misc"]},
        "Old body.",
    )
    store.save(
        ContentType.POSTS,
        "newer",
        {"title": "Newer Post", "date": "2024-01-15", "quicklook": "Fresh"},
        "New body.",
    )
    store.save(
        ContentType.POSTS,
        "draft",
        {"title": "Draft", "date": "2024-02-01", "listed": False},
        "Secret draft.",
    )
    store.save(ContentType.TOPICS, "topic", {"title": "A Topic"}, "Topic body.")
    store.save(
        ContentType.MAGAZINES,
        "issue-1",
        {"title": "Issue 1", "articles": ["older", "newer"], "description": "First"},
        "Magazine body.",
    )
    store.save(
        ContentType.DICTIONARY,
        "borrow",
        {"title": "Borrow", "reading": "bor-oh"},
        "Temporary access.",
    )
    return store


class TestValidateSlug:
    @pytest.mark.parametrize("slug", ["hello", "2024-01-rust", "日本語", "a.b"])
    def test_valid(self, slug):
        assert validate_slug(slug) == slug

    @pytest.mark.parametrize("slug", ["", "../etc/passwd", ".hidden", "a/b", "a\\b", "a\x00b"])
    def test_invalid(self, slug):
        with pytest.raises(InvalidSlugError):
            validate_slug(slug)

    def test_invalid_slug_is_a_value_error(self):
        with pytest.raises(ValueError):
            validate_slug("../x")


class TestSummarize:
    def test_post_summary(self):
        summary = summarize(
            ContentType.POSTS,
            "hello",
            {"title": "Hello", "tags": ["a"], "quicklook": "Q", "listed": True},
        )

        assert isinstance(summary, PostSummary)
        assert summary.title == "Hello"
        assert summary.tags == ["a"]
        assert summary.quicklook == "Q"
        assert summary.listed is True

    def test_defaults_for_missing_and_mistyped_fields(self):
        summary = summarize(ContentType.POSTS, "x", {"title": True, "tags": "not-a-list"})

        assert summary.title == "Untitled"
        assert summary.emoji == "📄"
        assert summary.tags == []
        assert summary.listed is True

    def test_only_explicit_false_unlists(self):
        assert summarize(ContentType.POSTS, "x", {"listed": False}).listed is False
        assert summarize(ContentType.POSTS, "x", {"listed": "no"}).listed is True

    def test_summary_class_per_type(self):
        assert isinstance(summarize(ContentType.MAGAZINES, "m", {}), MagazineSummary)
        assert isinstance(summarize(ContentType.DICTIONARY, "d", {}), DictionaryEntrySummary)
        assert isinstance(summarize(ContentType.TOPICS, "t", {}), PostSummary)
        assert summarize(ContentType.MAGAZINES, "m", {}).emoji == "📚"


class TestContentStore:
    def test_save_writes_front_matter_file(self, tmp_path):
        store = ContentStore(tmp_path)
        path = store.save(ContentType.POSTS, "hello", {"title": "Hello", "listed": True}, "Body")

        assert path == tmp_path / "posts" / "hello.md"
        assert path.read_text(encoding="utf-8") == "---\ntitle: Hello\nlisted: true\n---\n\nBody"

    def test_read(self, store):
        document = store.read(ContentType.POSTS, "older")

        assert document.metadata["title"] == "Older Post"
        assert document.metadata["tags"] == ["misc"]
        assert document.content == "Old body."

    def test_read_raw(self, store):
        assert store.read_raw("posts", "older").startswith("---\ntitle: Older Post\n")

    def test_read_missing(self, store):
        with pytest.raises(ContentNotFoundError) as exc_info:
            store.read(ContentType.POSTS, "missing")

        assert exc_info.value.slug == "missing"
        assert exc_info.value.content_type == "posts"
        assert isinstance(exc_info.value, MdpressError)

    def test_read_rejects_traversal(self, store):
        with pytest.raises(InvalidSlugError):
            store.read(ContentType.POSTS, "../posts/older")

    def test_list_entries_newest_first(self, store):
        entries = store.list_entries(ContentType.POSTS)
        assert [entry.slug for entry in entries] == ["draft", "newer", "older"]

    def test_list_only_listed(self, store):
        entries = store.list_entries(ContentType.POSTS, only_listed=True)
        assert [entry.slug for entry in entries] == ["newer", "older"]

    def test_list_missing_directory(self, tmp_path):
        assert ContentStore(tmp_path / "nothing").list_entries(ContentType.POSTS) == []

    def test_non_markdown_files_are_ignored(self, store, tmp_path):
        (tmp_path / "posts" / "notes.txt").write_text("ignored", encoding="utf-8")
        assert "notes" not in [entry.slug for entry in store.list_entries(ContentType.POSTS)]

    def test_delete(self, store):
        store.delete(ContentType.POSTS, "older")

        assert "older" not in [entry.slug for entry in store.list_entries(ContentType.POSTS)]
        with pytest.raises(ContentNotFoundError):
            store.delete(ContentType.POSTS, "older")

    def test_save_overwrites(self, store):
        store.save(ContentType.POSTS, "older", {"title": "Rewritten"}, "New text")

        assert store.read(ContentType.POSTS, "older").metadata == {"title": "Rewritten"}

    def test_cross_references(self, store):
        references = store.cross_references()

        assert {post.slug for post in references.posts} == {"draft", "newer", "older", "topic"}
        assert references.find_post("topic").title == "A Topic"
        assert references.find_magazine("issue-1").articles == ["older", "newer"]
        assert references.find_dictionary_entry("borrow").reading == "bor-oh"
        assert references.find_post("missing") is None

    def test_search_documents_skip_unlisted(self, store):
        documents = store.search_documents()

        assert {document.id for document in documents} == {
            "newer",
            "older",
            "topic",
            "issue-1",
            "borrow",
        }
        older = next(document for document in documents if document.id == "older")
        assert older.tags == ["misc"]
        assert older.type == "posts"
        assert older.plain_text == "Old body."

    def test_search_documents_include_unlisted(self, store):
        ids = {document.id for document in store.search_documents(include_unlisted=True)}
        assert "draft" in ids
