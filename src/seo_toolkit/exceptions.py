"""Exceptions raised by the authoring toolkit."""


class ToolkitError(Exception):
    """Base class for toolkit errors."""


class InvalidBaseUrlError(ToolkitError, ValueError):
    """The base URL handed to the tracking URL builder is not absolute."""

    def __init__(self, base: str):
        self.base = base
        super().__init__(f"Invalid base URL: {base!r}")


class StructuredDataParseError(ToolkitError):
    """A JSON-LD payload could not be parsed."""


class XmlParseError(ToolkitError):
    """A sitemap document is not well-formed XML."""


class ImageDecodeError(ToolkitError):
    """An uploaded image could not be decoded."""
