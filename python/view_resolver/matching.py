"""View name matching.

Decides whether a resolver is responsible for a view name. Names are
matched against a configured list of exact names or simple ``*`` glob
patterns; without a list every name is accepted.

Supported pattern styles:
- ``"xxx*"``: prefix match
- ``"*xxx"``: suffix match
- ``"*xxx*"``: substring match
- ``"xxx*yyy"``: prefix and suffix match
- ``"*"``: matches everything

Matching is case-sensitive and ``*`` cannot be escaped.

Example:
    >>> simple_match("foo*", "foobar")
    True
    >>> NameMatcher(["admin/*", "home"]).can_handle("admin/users")
    True
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def simple_match(pattern: str | None, name: str | None) -> bool:
    """Match a name against a simple ``*`` glob pattern.

    Args:
        pattern: Pattern to match against. None never matches.
        name: Name to match. None never matches.

    Returns:
        True if the name matches the pattern.
    """
    if pattern is None or name is None:
        return False

    first_index = pattern.find("*")
    if first_index == -1:
        return pattern == name

    if first_index == 0:
        if len(pattern) == 1:
            return True
        next_index = pattern.find("*", 1)
        if next_index == -1:
            return name.endswith(pattern[1:])
        part = pattern[1:next_index]
        if part == "":
            # Collapse "**"
            return simple_match(pattern[next_index:], name)
        part_index = name.find(part)
        while part_index != -1:
            if simple_match(pattern[next_index:], name[part_index + len(part) :]):
                return True
            part_index = name.find(part, part_index + 1)
        return False

    return (
        len(name) >= first_index
        and pattern[:first_index] == name[:first_index]
        and simple_match(pattern[first_index:], name[first_index:])
    )


def simple_match_any(patterns: Iterable[str] | None, name: str | None) -> bool:
    """Match a name against several patterns.

    Args:
        patterns: Patterns to try, in order. None never matches.
        name: Name to match.

    Returns:
        True if the name matches at least one pattern.
    """
    if patterns is None:
        return False
    return any(simple_match(pattern, name) for pattern in patterns)


class NameMatcher:
    """Gate deciding which view names a resolver handles.

    Attributes:
        view_names: Accepted names or patterns, or None to accept all.
    """

    def __init__(self, view_names: Sequence[str] | None = None) -> None:
        self._view_names = tuple(view_names) if view_names is not None else None

    @property
    def view_names(self) -> tuple[str, ...] | None:
        return self._view_names

    def can_handle(self, view_name: str, _locale: str | None = None) -> bool:
        """Check whether a view name is in the accepted set.

        Args:
            view_name: Symbolic view name.
            _locale: Locale of the request (unused, names are matched
                independently of locale).

        Returns:
            True if no names are configured or any pattern matches.
        """
        if self._view_names is None:
            return True
        return simple_match_any(self._view_names, view_name)

    def __repr__(self) -> str:
        return f"NameMatcher(view_names={self._view_names!r})"


__all__ = [
    "NameMatcher",
    "simple_match",
    "simple_match_any",
]
