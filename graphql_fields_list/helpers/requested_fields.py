import logging
from collections import deque
from collections.abc import Mapping
from typing import Literal, Optional

from .selection import Branch, Leaf

log = logging.getLogger(__name__)

Projection = dict[str, Literal[1]]


def to_dot_notation(parent: str, child: str) -> str:
    return f"{parent}.{child}" if parent else child


def get_branch(tree: Branch, path: Optional[str] = None) -> Branch:
    """
    Return the part of the requested fields tree found at the dot-notation
    `path`, e.g. `edges.node`. An empty Branch is returned when the path
    wasn't requested or points at a leaf field.
    """
    if not path:
        return tree

    for name in path.split("."):
        branch = tree.fields.get(name)
        if not isinstance(branch, Branch):
            log.debug("Requested fields branch not found", extra=dict(path=path))
            return Branch()
        tree = branch

    return tree


def to_projection(
    tree: Branch,
    transform: Optional[Mapping[str, str]] = None,
    keep_parent_field: bool = False,
) -> Projection:
    """
    Flatten a requested fields tree into `{"dot.notation.path": 1}` entries.

    For example `owner { repository { name } }` (resolved at the query root)
    gives `{"owner.repository.name": 1}`, plus `owner` and `owner.repository`
    when `keep_parent_field` is set. Leaf paths found in `transform` are
    renamed.
    """
    transform = transform or {}
    projection: Projection = {}
    queue = deque([("", tree)])

    while queue:
        parent, branch = queue.popleft()

        for name, child in branch.items():
            path = to_dot_notation(parent, name)

            match child:
                case Branch():
                    queue.append((path, child))
                    if keep_parent_field:
                        projection[path] = 1
                case Leaf():
                    projection[transform.get(path) or path] = 1

    return projection
