from typing import Any, Iterable, Mapping, Optional

from graphql.language import (
    ArgumentNode,
    BooleanValueNode,
    DirectiveNode,
    VariableNode,
)

INCLUSION_DIRECTIVES = ("include", "skip")


def check_value(name: str, value: Any) -> bool:
    if name == "skip":
        return not value
    if name == "include":
        return bool(value)
    return True


def verify_directive_arg(
    name: str, arg: ArgumentNode, variables: Mapping[str, Any]
) -> bool:
    value_node = arg.value
    if isinstance(value_node, BooleanValueNode):
        return check_value(name, value_node.value)
    if isinstance(value_node, VariableNode):
        return check_value(name, variables.get(value_node.name.value))
    # any other kind of value can't decide anything
    return True


def verify_directive(directive: DirectiveNode, variables: Mapping[str, Any]) -> bool:
    name = directive.name.value
    if name not in INCLUSION_DIRECTIVES:
        return True

    return all(
        verify_directive_arg(name, arg, variables)
        for arg in directive.arguments or ()
    )


def verify_directives(
    directives: Optional[Iterable[DirectiveNode]],
    variables: Optional[Mapping[str, Any]],
) -> bool:
    """
    Whether the `@skip` / `@include` directives of a selection allow it to be
    returned, given the variables of the current operation. Every directive
    has to allow it, so `@skip(if: true) @include(if: true)` is skipped.
    """
    if not directives:
        return True

    variables = variables or {}
    return all(verify_directive(directive, variables) for directive in directives)
