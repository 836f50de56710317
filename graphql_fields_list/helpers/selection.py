import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Union

from graphql.language import (
    FieldNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    InlineFragmentNode,
    SelectionNode,
)

from .directives import verify_directives
from .skip import SkipTree, SkipValue

log = logging.getLogger(__name__)


class Leaf:
    """
    A requested field without sub-selections. Use the `LEAF` singleton.
    """

    __slots__ = ()

    def __repr__(self):
        return "LEAF"

    def __eq__(self, other):
        return isinstance(other, Leaf)

    def __hash__(self):
        return hash(Leaf)

    def as_dict(self) -> bool:
        return False


LEAF = Leaf()


@dataclass
class Branch:
    """
    A requested field with sub-selections, or the root of the requested
    fields tree. `fields` keeps the order in which fields were first seen.
    """

    fields: dict[str, Union[Leaf, "Branch"]] = field(default_factory=dict)

    def __getitem__(self, name: str) -> Union[Leaf, "Branch"]:
        return self.fields[name]

    def __contains__(self, name: str) -> bool:
        return name in self.fields

    def __iter__(self):
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def items(self):
        return self.fields.items()

    def as_dict(self) -> dict[str, Any]:
        """
        Plain dict rendering, leaves are `False` and branches nested dicts
        """
        return {name: child.as_dict() for name, child in self.fields.items()}


FieldTree = Union[Leaf, Branch]


@dataclass(frozen=True)
class TraverseOptions:
    fragments: Mapping[str, FragmentDefinitionNode]
    variables: Mapping[str, Any]
    skip_tree: SkipTree
    with_directives: bool = True


def get_selections(
    node: Union[SelectionNode, FragmentDefinitionNode],
) -> Sequence[SelectionNode]:
    selection_set = getattr(node, "selection_set", None)
    if selection_set is None:
        return ()
    return selection_set.selections or ()


def traverse(
    selections: Iterable[SelectionNode],
    root: Branch,
    opts: TraverseOptions,
    skip: SkipValue,
) -> Branch:
    """
    Fill `root` with the fields requested by `selections`.

    Fragments (inline or named) don't add a level to the tree, their fields
    are merged into the level they are spread into. Named fragments are
    recognised by node kind (`FragmentSpreadNode`) and then looked up by
    name in `opts.fragments`; a field sharing a fragment's name is still a
    field, and a spread of an unknown fragment is logged and ignored.
    Fragments referencing themselves are rejected by query validation and
    are not checked here.
    """
    for selection in selections:
        if opts.with_directives and not verify_directives(
            selection.directives, opts.variables
        ):
            continue

        match selection:
            case InlineFragmentNode():
                traverse(get_selections(selection), root, opts, skip)

            case FragmentSpreadNode():
                fragment_name = selection.name.value
                fragment = opts.fragments.get(fragment_name)
                if fragment is None:
                    log.warning(
                        "Unknown fragment spread in selection",
                        extra=dict(fragment=fragment_name),
                    )
                    continue
                traverse(get_selections(fragment), root, opts, skip)

            case FieldNode():
                name = selection.name.value
                children = get_selections(selection)
                field_skip = opts.skip_tree.lookup(name, skip)

                if field_skip is True:
                    continue

                if not children:
                    root.fields.setdefault(name, LEAF)
                    continue

                branch = root.fields.get(name)
                if not isinstance(branch, Branch):
                    branch = root.fields[name] = Branch()

                traverse(children, branch, opts, field_skip)

            case _:
                raise NotImplementedError(
                    f"selection type {type(selection)} not supported"
                )

    return root
