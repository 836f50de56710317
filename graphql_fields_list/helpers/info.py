import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Optional

from graphql.language import FieldNode, FragmentDefinitionNode

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExecutionInfo:
    """
    The parts of a `GraphQLResolveInfo` needed to find out which fields
    were requested, read once at the boundary.
    """

    field_name: str
    field_nodes: Sequence[FieldNode]
    fragments: Mapping[str, FragmentDefinitionNode] = field(default_factory=dict)
    variable_values: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_resolve_info(cls, info) -> Optional["ExecutionInfo"]:
        """
        Normalize a resolve info object. graphql-core 2 named the field
        nodes list `field_asts`, which is accepted as well. graphql-core 3.3
        wraps the variables in a `VariableValues` tuple of raw `sources` and
        `coerced` values, the coerced ones are used.
        Returns None when there is nothing to look at.
        """
        if info is None:
            return None

        field_nodes = getattr(info, "field_nodes", None)
        if not field_nodes:
            field_nodes = getattr(info, "field_asts", None)
        if not field_nodes:
            return None

        variable_values = getattr(info, "variable_values", None)
        variable_values = getattr(variable_values, "coerced", variable_values)

        return cls(
            field_name=getattr(info, "field_name", None),
            field_nodes=field_nodes,
            fragments=getattr(info, "fragments", None) or {},
            variable_values=variable_values or {},
        )


def get_field_node(info) -> Optional[FieldNode]:
    """
    Return the field node of the field currently being resolved, provided
    that it has sub-selections. Resolvers of scalar fields get None.
    """
    execution_info = (
        info
        if isinstance(info, ExecutionInfo)
        else ExecutionInfo.from_resolve_info(info)
    )
    if execution_info is None:
        log.debug("No field nodes on resolve info")
        return None

    for node in execution_info.field_nodes:
        if node is None or node.name is None:
            continue
        if node.name.value != execution_info.field_name:
            continue
        if node.selection_set and node.selection_set.selections:
            return node
        break

    log.debug(
        "No fields requested", extra=dict(field_name=execution_info.field_name)
    )
    return None
