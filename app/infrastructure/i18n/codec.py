"""Key-path codec.

Converts between nested resource trees and flat mappings keyed by
dot-delimited paths.

    flatten({"a": {"b": "hi"}})  -> {"a.b": "hi"}
    unflatten({"a.b": "hi"})     -> {"a": {"b": "hi"}}

Arrays and scalars are leaves and are carried verbatim. An empty mapping is
kept as a ``{}`` placeholder leaf so empty sections survive a round trip; a
placeholder is a container, so writing a path beneath it is not a collision.

A resource file is either nested (no key contains the separator) or flat
(dotted keys at the top level, no sections). ``layout_of`` tells them apart
and ``to_tree`` rebuilds a FlatMap in the layout the file was read in.
"""

from typing import Any, Dict, Iterable, List, Optional

from infrastructure.i18n.errors import PathCollisionError, ValidationError

SEPARATOR = "."

NESTED = "nested"
FLAT = "flat"

ResourceTree = Dict[str, Any]
FlatMap = Dict[str, Any]


def is_placeholder(value: Any) -> bool:
    """Return True for an empty mapping standing in for an empty section."""
    return isinstance(value, dict) and not value


def split_path(path: str) -> List[str]:
    """Split a dot-path into segments.

    Raises:
        ValidationError: If the path is empty or has an empty segment
            (``"a..b"``, ``".a"``, ``"a."``).
    """
    if not isinstance(path, str) or not path:
        raise ValidationError("Key must be a non-empty string")
    segments = path.split(SEPARATOR)
    if any(segment == "" for segment in segments):
        raise ValidationError(f"Key '{path}' contains an empty segment")
    return segments


def flatten(tree: ResourceTree, prefix: str = "") -> FlatMap:
    """Project a tree onto a flat mapping of dot-paths to leaf values.

    Raises:
        PathCollisionError: If two locations of the tree share a dot-path,
            e.g. a literal ``"a.b"`` key next to ``{"a": {"b": ...}}``.
    """
    flat: FlatMap = {}
    _flatten_into(flat, tree, prefix)
    return flat


def _flatten_into(flat: FlatMap, tree: ResourceTree, prefix: str) -> None:
    for segment, value in tree.items():
        path = f"{prefix}{SEPARATOR}{segment}" if prefix else str(segment)
        if isinstance(value, dict) and value:
            _flatten_into(flat, value, path)
            continue
        if path in flat:
            raise PathCollisionError(path, path)
        flat[path] = {} if isinstance(value, dict) else value


def assign(tree: ResourceTree, path: str, value: Any, legacy: bool = False) -> None:
    """Set ``path`` to ``value`` inside ``tree``, creating missing levels.

    In strict mode a leaf standing where a section is needed, or a populated
    section about to be replaced by a leaf, raises PathCollisionError. With
    ``legacy=True`` the old value is silently replaced instead.
    """
    segments = split_path(path)
    node = tree
    for depth, segment in enumerate(segments[:-1]):
        child = node.get(segment)
        if isinstance(child, dict):
            node = child
            continue
        if segment in node and not legacy:
            raise PathCollisionError(path, SEPARATOR.join(segments[: depth + 1]))
        node[segment] = {}
        node = node[segment]

    last = segments[-1]
    current = node.get(last)
    if is_placeholder(value):
        if not isinstance(current, dict):
            node[last] = {}
        return
    if isinstance(current, dict) and current and not legacy:
        raise PathCollisionError(path, next(iter(flatten(current, path))))
    node[last] = value


def unflatten(flat: FlatMap, legacy: bool = False) -> ResourceTree:
    """Rebuild a tree from a flat mapping.

    Raises:
        PathCollisionError: In strict mode, when one path is a leaf and a
            prefix of another.
    """
    tree: ResourceTree = {}
    for path, value in flat.items():
        assign(tree, path, value, legacy=legacy)
    return tree


def find_collision(flat: FlatMap, path: str, value: Any = None) -> Optional[str]:
    """Return an existing key that writing ``path`` would collide with."""
    segments = split_path(path)
    for depth in range(1, len(segments)):
        ancestor = SEPARATOR.join(segments[:depth])
        if ancestor in flat and not is_placeholder(flat[ancestor]):
            return ancestor
    if is_placeholder(value):
        return None
    prefix = path + SEPARATOR
    for existing in flat:
        if existing.startswith(prefix):
            return existing
    return None


def validate_paths(paths: Iterable[str], flat: FlatMap) -> None:
    """Check that none of ``paths`` is a leaf prefix of another key in ``flat``.

    Raises:
        ValidationError: For malformed paths.
        PathCollisionError: For the first collision found.
    """
    for path in paths:
        segments = split_path(path)
        for depth in range(1, len(segments)):
            ancestor = SEPARATOR.join(segments[:depth])
            if ancestor in flat and not is_placeholder(flat[ancestor]):
                raise PathCollisionError(path, ancestor)


def _plain_keys(tree: ResourceTree) -> bool:
    for key, value in tree.items():
        if not isinstance(key, str) or not key or SEPARATOR in key:
            return False
        if isinstance(value, dict) and not _plain_keys(value):
            return False
    return True


def layout_of(tree: ResourceTree) -> Optional[str]:
    """Return the key layout of a decoded file.

    Returns:
        NESTED when no key contains the separator, FLAT when the top level
        holds only leaves, None when the tree mixes both.
    """
    if _plain_keys(tree):
        return NESTED
    if not any(isinstance(value, dict) and value for value in tree.values()):
        return FLAT
    return None


def to_tree(flat: FlatMap, layout: str = NESTED, legacy: bool = False) -> ResourceTree:
    """Rebuild the tree written to a file of the given layout."""
    if layout == FLAT:
        return dict(flat)
    return unflatten(flat, legacy=legacy)
