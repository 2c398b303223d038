from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Post:
    date: str
    title: str
    slug: str
