"""Set of paths whose metadata has been announced."""

from __future__ import annotations

from collections.abc import Iterator


class SeenPathSet:
    """Grow-only set of announced paths.

    Lives for the lifetime of the plugin instance.  Nothing is persisted, so
    metadata is announced again after a restart.
    """

    def __init__(self) -> None:
        self._paths: set[str] = set()

    def add(self, path: str) -> bool:
        """Record *path*; return ``True`` only when it was not seen before."""
        if path in self._paths:
            return False
        self._paths.add(path)
        return True

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._paths))
