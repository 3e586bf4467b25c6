"""Resolve a decoded message to a destination path.

The mapping table is scanned in order and the first matching rule wins.
A rule matches when

1. its selector is the wildcard ``"*"``, or
2. its selector equals the message source code, both compared in string
   form (so ``7``, ``"7"`` and ``7.0`` are the same code), or
3. its ``name`` equals the message source.  canboat decodes source codes
   0-14 to names such as ``"Sea Temperature"``, so this secondary check is
   what lets numeric selectors in the default table catch them.

The table is never re-ordered or indexed: overlapping selectors (the default
table lists code 7 twice) must keep their first-match semantics.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError

from pgn130316.models.mapping import MappingRule, ResolvedMapping
from pgn130316.normalize import source_key

_logger = logging.getLogger(__name__)

_PLACEHOLDER_RE = re.compile(r"\$\{(source|instance|name)\}")


def rule_matches(rule: MappingRule, key: str) -> bool:
    """Return ``True`` when *rule* selects the normalized source *key*."""
    if rule.is_wildcard:
        return True
    if rule.selector == key:
        return True
    return rule.name is not None and rule.name == key


def render_path(template: str, *, source: Any, instance: Any, name: str | None) -> str:
    """Substitute placeholders in *template*.

    Every occurrence of ``${source}``, ``${instance}`` and ``${name}`` is
    replaced in a single pass over the template, so substituted text is never
    expanded again.  A placeholder without a value (``${name}`` for an
    unnamed rule) is left in the path as literal text.
    """

    values: dict[str, str | None] = {
        "source": source_key(source),
        "instance": source_key(instance),
        "name": name,
    }

    def _substitute(match: re.Match[str]) -> str:
        value = values[match.group(1)]
        return match.group(0) if value is None else value

    return _PLACEHOLDER_RE.sub(_substitute, template)


def resolve(rules: Iterable[MappingRule], source: Any, instance: Any) -> ResolvedMapping | None:
    """Return the mapping for ``(source, instance)`` or ``None`` when no rule matches.

    ``${source}`` is filled with the matching rule's selector.  For the
    wildcard rule the message's own source code is used instead, so an
    unrecognized code 99 on instance 5 lands at
    ``sensors.temperature.99.5``.  Inputs that cannot form a mapping (no
    source, non-numeric instance) resolve to ``None`` as well.
    """

    key = source_key(source)
    for rule in rules:
        if not rule_matches(rule, key):
            continue
        selected = source if rule.is_wildcard else rule.source
        try:
            return ResolvedMapping(
                source=selected,
                instance=instance,
                name=rule.name,
                path=render_path(rule.path, source=selected, instance=instance, name=rule.name),
            )
        except ValidationError:
            _logger.debug("Cannot map source %r instance %r", source, instance)
            return None
    return None
