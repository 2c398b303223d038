from __future__ import annotations

import logging
from typing import List

from inkwell.config import POST_EXTENSION
from inkwell.exceptions import AssetNotFound, MalformedContent
from inkwell.models.post import Post
from inkwell.services.asset_store import AssetStore
from inkwell.services.markdown_renderer import render


logger = logging.getLogger(__name__)

DATE_SEPARATOR = "_"


def derive_post(filename: str) -> Post:
    """Derive ``Post`` metadata from a ``{date}_{title-words}.md`` filename."""
    if not filename.endswith(POST_EXTENSION):
        raise MalformedContent(
            f"Post filename {filename!r} does not end with {POST_EXTENSION!r}"
        )

    slug = filename[: -len(POST_EXTENSION)]
    date, separator, title_part = slug.partition(DATE_SEPARATOR)
    if not separator:
        raise MalformedContent(
            f"Post filename {filename!r} has no {DATE_SEPARATOR!r} between its date and title"
        )

    return Post(date=date, title=title_part.replace("-", " "), slug=slug)


def list_posts(store: AssetStore) -> List[Post]:
    """Return every top-level post in ``store``, newest first.

    Files in subdirectories are skipped; their slugs would contain a slash,
    which the post route does not match.
    """
    posts = [
        derive_post(name)
        for name in store.list()
        if name.endswith(POST_EXTENSION) and "/" not in name
    ]
    posts.sort(key=lambda post: post.slug)
    posts.sort(key=lambda post: post.date, reverse=True)
    return posts


def decode_source(data: bytes, name: str) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedContent(
            f"Post {name!r} is not valid UTF-8 (byte {exc.start}): {exc.reason}"
        ) from exc


def load_post_html(store: AssetStore, slug: str) -> str:
    filename = f"{slug}{POST_EXTENSION}"
    data = store.get(filename)
    if data is None:
        raise AssetNotFound(filename)

    logger.debug("Rendering post %s", filename)
    return render(decode_source(data, filename))
