from typing import Any, Optional

from graphql import GraphQLResolveInfo

from .config import FieldsListOptions, ParsedOptions, parse_options
from .helpers.info import ExecutionInfo, get_field_node
from .helpers.requested_fields import Projection, get_branch, to_projection
from .helpers.selection import Branch, TraverseOptions, get_selections, traverse
from .helpers.skip import SkipTree


def fields_tree(
    info: GraphQLResolveInfo, options: Optional[FieldsListOptions] = None
) -> Branch:
    """
    Return the tree of fields requested below the field being resolved, or
    below `options["path"]` when given.

    Example, inside the resolver of `user`:

        query { user { id profile { email } } }

    gives `Branch({"id": LEAF, "profile": Branch({"email": LEAF})})`
    """
    return _fields_tree(info, parse_options(options))


def _fields_tree(info: GraphQLResolveInfo, parsed: ParsedOptions) -> Branch:
    execution_info = ExecutionInfo.from_resolve_info(info)
    field_node = get_field_node(execution_info)

    if field_node is None:
        return Branch()

    skip_tree = SkipTree(parsed.skip)
    tree = traverse(
        get_selections(field_node),
        Branch(),
        TraverseOptions(
            fragments=execution_info.fragments,
            variables=execution_info.variable_values,
            skip_tree=skip_tree,
            with_directives=parsed.with_directives,
        ),
        skip_tree.rules,
    )

    return get_branch(tree, parsed.path)


def fields_map(
    info: GraphQLResolveInfo, options: Optional[FieldsListOptions] = None
) -> dict[str, Any]:
    """
    Same as `fields_tree` but as plain nested dicts, with `False` standing
    for fields without sub-selections:

        {"id": False, "profile": {"email": False}}
    """
    return fields_tree(info, options).as_dict()


def fields_list(
    info: GraphQLResolveInfo, options: Optional[FieldsListOptions] = None
) -> list[str]:
    """
    Names of the fields requested directly below the field being resolved
    (or below `options["path"]`), renamed through `options["transform"]`.
    """
    parsed = parse_options(options)
    transform = parsed.transform
    return [transform.get(name) or name for name in _fields_tree(info, parsed)]


def fields_projection(
    info: GraphQLResolveInfo, options: Optional[FieldsListOptions] = None
) -> Projection:
    """
    Requested fields as a flat `{"dot.notation.path": 1}` projection, the
    shape most document stores accept for selecting fields.
    """
    parsed = parse_options(options)
    return to_projection(
        _fields_tree(info, parsed),
        transform=parsed.transform,
        keep_parent_field=parsed.keep_parent_field,
    )
