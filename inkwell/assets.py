from __future__ import annotations

from typing import Optional

from inkwell.config import POSTS_DIR, PUBLIC_DIR
from inkwell.services.asset_store import AssetStore


_posts_store: Optional[AssetStore] = None
_public_store: Optional[AssetStore] = None


def init_assets() -> None:
    """Snapshot the posts and public directories into memory."""
    global _posts_store, _public_store
    _posts_store = AssetStore.from_directory(POSTS_DIR)
    _public_store = AssetStore.from_directory(PUBLIC_DIR)


def get_posts_store() -> AssetStore:
    if _posts_store is None:
        init_assets()
    return _posts_store


def get_public_store() -> AssetStore:
    if _public_store is None:
        init_assets()
    return _public_store
