class MdpressError(Exception):
    """Base class for errors raised by the file-backed layer of mdpress.

    Rendering, extraction and search never raise for malformed content; only
    reading and writing content files does."""

    pass


class ContentNotFoundError(MdpressError):
    """The requested entry has no file in its content directory."""

    def __init__(self, content_type: str, slug: str):
        super().__init__(f"No {content_type} entry named `{slug}`")
        self.content_type = content_type
        self.slug = slug


class InvalidSlugError(MdpressError, ValueError):
    """The slug cannot be mapped to a file inside the content directory."""

    pass

