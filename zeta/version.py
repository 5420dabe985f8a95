"""Version metadata for zeta."""

from __future__ import annotations

VERSION = "0.1.0"
PROJECT_URL = "https://github.com/yourusername/zeta"


def version_text() -> str:
    return f"zeta version {VERSION}\n{PROJECT_URL}\n"


__all__ = ["VERSION", "PROJECT_URL", "version_text"]
