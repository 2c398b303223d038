from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent.parent

POSTS_DIR = Path(os.getenv("INKWELL_POSTS_DIR", str(BASE_DIR / "posts"))).expanduser()
PUBLIC_DIR = Path(os.getenv("INKWELL_PUBLIC_DIR", str(BASE_DIR / "public"))).expanduser()
TEMPLATES_DIR = Path(os.getenv("INKWELL_TEMPLATES_DIR", str(BASE_DIR / "templates"))).expanduser()
SITE_CONFIG_PATH = Path(os.getenv("INKWELL_SITE_CONFIG", str(BASE_DIR / "site.yaml"))).expanduser()

HOST = os.getenv("INKWELL_HOST", "127.0.0.1")
PORT_SETTING = os.getenv("INKWELL_PORT", "8000")
LOG_LEVEL = os.getenv("INKWELL_LOG_LEVEL", "INFO").upper()

POST_EXTENSION = ".md"


def parse_port(value: str = PORT_SETTING) -> int:
    try:
        port = int(value)
    except ValueError:
        raise ValueError(f"INKWELL_PORT must be an integer, got {value!r}") from None
    if not 0 < port < 65536:
        raise ValueError(f"INKWELL_PORT must be between 1 and 65535, got {port}")
    return port


@dataclass(slots=True)
class SiteSettings:
    title: str = "Inkwell"
    author: str = ""
    description: Optional[str] = None


def load_site_settings(path: Path = SITE_CONFIG_PATH) -> SiteSettings:
    """Read presentational site metadata, falling back to defaults."""
    if not path.exists():
        return SiteSettings()

    try:
        with path.open("r", encoding="utf-8") as fp:
            data = yaml.safe_load(fp) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Failed to load site settings from %s: %s", path, exc)
        return SiteSettings()

    if not isinstance(data, dict):
        logger.warning("site settings file %s is not in expected format", path)
        return SiteSettings()

    defaults = SiteSettings()
    description = data.get("description")
    if isinstance(description, str):
        description = description.strip() or None
    else:
        description = None
    return SiteSettings(
        title=str(data.get("title") or defaults.title).strip(),
        author=str(data.get("author") or defaults.author).strip(),
        description=description,
    )
