from __future__ import annotations

import logging
import mimetypes
from pathlib import Path, PurePosixPath
from types import MappingProxyType
from typing import List, Mapping, Optional

from inkwell.exceptions import UnsupportedContentType


logger = logging.getLogger(__name__)


class AssetStore:
    """Read-only mapping of relative POSIX paths to file contents.

    The contents are captured once when the store is built; nothing writes to
    it afterwards, so concurrent request handlers may share one instance.
    """

    def __init__(self, files: Mapping[str, bytes]) -> None:
        self._files = MappingProxyType(dict(files))

    @classmethod
    def from_directory(cls, root: Path) -> "AssetStore":
        if not root.is_dir():
            logger.warning("Asset directory %s does not exist, serving nothing from it", root)
            return cls({})

        files = {}
        for path in sorted(root.rglob("*")):
            if not path.is_file():
                continue
            files[path.relative_to(root).as_posix()] = path.read_bytes()

        logger.debug("Loaded %d assets from %s", len(files), root)
        return cls(files)

    def get(self, path: str) -> Optional[bytes]:
        return self._files.get(path)

    def list(self) -> List[str]:
        return sorted(self._files)

    def __contains__(self, path: object) -> bool:
        return path in self._files

    def __len__(self) -> int:
        return len(self._files)


def resolve_content_type(path: str) -> str:
    """Return the media type for ``path`` based on its file extension."""
    if not PurePosixPath(path).suffix:
        raise UnsupportedContentType(path, "Could not get file extension")

    content_type, _ = mimetypes.guess_type(path, strict=True)
    if content_type is None:
        raise UnsupportedContentType(path, "Could not get file content type")
    return content_type
