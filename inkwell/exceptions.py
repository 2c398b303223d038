from __future__ import annotations


class InkwellError(Exception):
    """Base class for errors raised by the content pipeline."""


class MalformedContent(InkwellError, ValueError):
    """A post violates the naming convention or is not decodable text."""


class AssetNotFound(InkwellError, LookupError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Asset not found: {path}")
        self.path = path


class UnsupportedContentType(InkwellError, ValueError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{reason}: {path}")
        self.path = path
        self.reason = reason
