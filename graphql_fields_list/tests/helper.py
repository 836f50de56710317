from types import SimpleNamespace
from typing import Any, Optional

from graphql.language import (
    FieldNode,
    FragmentDefinitionNode,
    OperationDefinitionNode,
    parse,
)


def parse_into_resolveinfo(
    source: str, variables: Optional[dict[str, Any]] = None, field_name=None
) -> SimpleNamespace:
    """
    Build a stand-in for the resolve info of the root field of `source`
    (or of `field_name`), carrying the attributes graphql-core sets.
    """
    document = parse(source)

    operation: OperationDefinitionNode | None = None
    fragments: dict[str, FragmentDefinitionNode] = {}

    for definition in document.definitions:
        if isinstance(definition, OperationDefinitionNode):
            operation = definition
        elif isinstance(definition, FragmentDefinitionNode):
            fragments[definition.name.value] = definition

    assert operation
    field_nodes: list[FieldNode] = [
        selection
        for selection in operation.selection_set.selections
        if isinstance(selection, FieldNode)
    ]

    return SimpleNamespace(
        field_name=field_name or field_nodes[0].name.value,
        field_nodes=field_nodes,
        fragments=fragments,
        variable_values=variables or {},
    )
