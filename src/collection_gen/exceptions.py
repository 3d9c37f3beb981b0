"""Exceptions raised by the collection generator.

Every error is terminal for the single collection being processed; the
driver decides whether the rest of the batch continues.
"""


class CollectionGenError(Exception):
    """Base exception for all collection generator errors."""

    def __init__(self, message: str, *args):
        self.message = message
        super().__init__(message, *args)


class InvalidDescriptorError(CollectionGenError, ValueError):
    """A collection descriptor is malformed.

    Attributes:
        collection: Name of the offending collection, when known.
    """

    def __init__(self, message: str, collection: str | None = None):
        self.collection = collection
        if collection:
            message = f"{collection}: {message}"
        super().__init__(message)


class TemplateRenderError(CollectionGenError):
    """The template could not be loaded or rendered for a collection.

    Attributes:
        collection: Name of the collection being rendered.
        cause: The underlying Jinja2 error.
    """

    def __init__(self, collection: str, cause: Exception | None = None):
        self.collection = collection
        self.cause = cause
        message = f"Failed to render collection '{collection}'"
        if cause:
            message += f": {cause}"
        super().__init__(message)


class ConfigurationError(CollectionGenError):
    """The descriptor table could not be loaded."""

    def __init__(self, source: str, cause: Exception | None = None):
        self.source = source
        self.cause = cause
        message = f"Failed to load configuration from '{source}'"
        if cause:
            message += f": {cause}"
        super().__init__(message)
