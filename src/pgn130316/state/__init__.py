"""Per-feature mutable state.

The only mutable state is the set of leaf paths whose metadata has already
been announced.  It is owned by one plugin instance, never shared through a
module-level global.
"""

from pgn130316.state.seen import SeenPathSet

__all__ = ["SeenPathSet"]
