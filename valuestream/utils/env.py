from __future__ import annotations

"""Helpers for loading environment configuration."""

import logging
import os
from pathlib import Path
from typing import Optional, Tuple, Union

from valuestream.config import DEFAULT_URL_PREFIX

_ENV_LOADED = False

_LOGGER = logging.getLogger(__name__)


def load_dotenv(dotenv_path: Union[str, Path] = ".env") -> None:
    """Load environment variables from a simple ``.env`` file if present."""
    global _ENV_LOADED
    if _ENV_LOADED:
        return

    path = Path(dotenv_path)
    if path.exists():
        for line in path.read_text().splitlines():
            parsed = _parse_line(line)
            if parsed:
                key, value = parsed
                os.environ.setdefault(key, value)
        _LOGGER.debug("Loaded environment defaults from %s", path)

    _ENV_LOADED = True


def _parse_line(line: str) -> Optional[Tuple[str, str]]:
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None

    if "=" not in stripped:
        return None

    key, value = stripped.split("=", 1)
    return (key.strip(), value.strip())


def _truthy(value: Optional[str]) -> bool:
    if value is None:
        return False
    lowered = value.strip().lower()
    return lowered in {"1", "true", "yes", "on"}


def url_prefix() -> str:
    """Return the path prefix generated locators are mounted under.

    Controlled by ``VSM_URL_PREFIX``; an unset or blank value falls back to
    the server's default mount point.
    """

    load_dotenv()
    value = os.environ.get("VSM_URL_PREFIX", "").strip()
    if not value:
        return DEFAULT_URL_PREFIX
    return "/" + value.strip("/") if value.strip("/") else ""


def strict_graph_validation() -> bool:
    """Return True when raw graphs must be checked before presentation.

    Controlled by ``VSM_STRICT_GRAPH``. Any of "1/true/yes/on" enables it.
    """

    load_dotenv()
    return _truthy(os.environ.get("VSM_STRICT_GRAPH"))
