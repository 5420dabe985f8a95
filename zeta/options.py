"""Per-invocation listing options.

Environment-derived values (color, Unicode, permission style) are resolved once
by the caller and stored here; the pipeline never re-reads the environment.
"""

from __future__ import annotations

from dataclasses import dataclass

from .format import PermissionStyle, TimeStyle
from .sorting import SortContext, SortMethod
from .theme import DEFAULT_THEME


@dataclass(frozen=True)
class ListingOptions:
    include_hidden: bool = False
    follow_symlinks: bool = False
    sort_method: SortMethod = SortMethod.NAME
    dirs_first: bool = True
    reverse: bool = False
    use_color: bool = False
    use_unicode: bool = True
    theme_name: str = DEFAULT_THEME.name
    time_style: TimeStyle = TimeStyle.RELATIVE
    permission_style: PermissionStyle = PermissionStyle.POSIX

    def sort_context(self) -> SortContext:
        return SortContext(method=self.sort_method, dirs_first=self.dirs_first, reverse=self.reverse)


__all__ = ["ListingOptions"]
