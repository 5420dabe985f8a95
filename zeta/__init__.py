"""Public package surface for zeta.

Exports ``main`` for programmatic CLI invocation.
Most implementation lives in submodules under ``zeta``.
"""

from __future__ import annotations

from .version import VERSION

__version__ = VERSION


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = ["main", "__version__"]
