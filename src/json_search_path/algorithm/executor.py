"""Operation executor: get / set / remove at one ResolvedPath.

Every call re-walks the path's concrete steps from the root.  Nothing holds a
live reference between calls, so a path that went stale because the tree was
mutated is detected and reported as PathNotFoundError instead of touching the
wrong node.

None of these functions creates missing containers or members: the path must
already exist step by step.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, NoReturn

from json_search_path.adapters import NativeAdapter
from json_search_path.errors import PathNotFoundError, RootMutationError

if TYPE_CHECKING:
    from json_search_path.path.resolved import ResolvedPath, Step
    from json_search_path.protocols import ValueAdapter

__all__ = ["get_value", "remove_value", "set_value"]

logger = logging.getLogger(__name__)

# Module-level adapter (stateless, safe to share)
_default_adapter = NativeAdapter()

_ABSENT = object()
_MISSING = object()


def get_value(
    tree: Any,
    path: ResolvedPath,
    adapter: ValueAdapter | None = None,
    default: Any = _MISSING,
) -> Any:
    """Return the value at ``path``.

    Args:
        tree:    Root of the value tree.
        path:    Concrete path, normally produced by the resolver.
        adapter: ValueAdapter for the tree.  Defaults to ``NativeAdapter``.
        default: Returned instead of raising when the path does not exist.

    Returns:
        The addressed node itself (not a copy).

    Raises:
        PathNotFoundError: If the path does not exist and no default is given.
    """
    try:
        return _descend(_adapter(adapter), tree, path, len(path))
    except PathNotFoundError:
        if default is _MISSING:
            raise
        return default


def set_value(
    tree: Any,
    path: ResolvedPath,
    value: Any,
    adapter: ValueAdapter | None = None,
) -> None:
    """Replace the value at ``path`` with ``value``.

    Raises:
        PathNotFoundError: If the path (including its final step) does not
            exist.  Missing members are never created.
        RootMutationError: If ``path`` is the root.
    """
    if not path.steps:
        raise RootMutationError("replace")

    resolved_adapter = _adapter(adapter)
    parent = _descend(resolved_adapter, tree, path, len(path) - 1)
    last = path.steps[-1]
    if _child(resolved_adapter, parent, last) is _ABSENT:
        _not_found(path, len(path) - 1)

    if isinstance(last, str):
        resolved_adapter.set_member(parent, last, value)
    else:
        resolved_adapter.set_element(parent, last, value)
    logger.debug("Set value at '%s'", path)


def remove_value(
    tree: Any,
    path: ResolvedPath,
    adapter: ValueAdapter | None = None,
) -> Any:
    """Delete the member or element at ``path`` and return it.

    Removing an array element compacts the array: every later element shifts
    down by one index.  Removing an object member keeps the order of the
    remaining keys.

    Raises:
        PathNotFoundError: If the path does not exist.
        RootMutationError: If ``path`` is the root.
    """
    if not path.steps:
        raise RootMutationError("remove")

    resolved_adapter = _adapter(adapter)
    parent = _descend(resolved_adapter, tree, path, len(path) - 1)
    last = path.steps[-1]
    if _child(resolved_adapter, parent, last) is _ABSENT:
        _not_found(path, len(path) - 1)

    if isinstance(last, str):
        removed = resolved_adapter.remove_member(parent, last)
    else:
        removed = resolved_adapter.remove_element(parent, last)
    logger.debug("Removed value at '%s'", path)
    return removed


# ---------------------------------------------------------------------------
# Walking helpers
# ---------------------------------------------------------------------------


def _adapter(adapter: ValueAdapter | None) -> Any:
    return adapter if adapter is not None else _default_adapter


def _child(adapter: Any, node: Any, step: Step) -> Any:
    """Return the child of ``node`` at ``step``, or ``_ABSENT``."""
    if isinstance(step, str):
        if adapter.is_object(node) and adapter.has_member(node, step):
            return adapter.get_member(node, step)
        return _ABSENT
    if adapter.is_array(node) and 0 <= step < adapter.length(node):
        return adapter.get_element(node, step)
    return _ABSENT


def _descend(adapter: Any, tree: Any, path: ResolvedPath, count: int) -> Any:
    """Walk the first ``count`` steps of ``path`` from ``tree``."""
    node = tree
    for depth in range(count):
        node = _child(adapter, node, path.steps[depth])
        if node is _ABSENT:
            _not_found(path, depth)
    return node


def _not_found(path: ResolvedPath, depth: int) -> NoReturn:
    logger.debug("Path '%s' not found at step %d", path, depth)
    raise PathNotFoundError(path, depth)
