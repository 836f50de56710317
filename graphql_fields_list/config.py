from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional, TypedDict

from .exceptions import ValidationError


class FieldsListOptions(TypedDict, total=False):
    # dot-notation path to the branch of the requested fields tree to return
    path: str
    # field name (or dot-notation path, for projections) -> replacement name
    transform: dict[str, str]
    # honour @skip / @include directives
    with_directives: bool
    # include intermediate parent paths in projections
    keep_parent_field: bool
    # dot-notation skip patterns, `*` segments allowed (e.g. "users.*")
    skip: list[str]


DEFAULT_OPTIONS: FieldsListOptions = {
    "path": "",
    "transform": {},
    "with_directives": True,
    "keep_parent_field": False,
    "skip": [],
}


@dataclass(frozen=True)
class ParsedOptions:
    path: str = ""
    transform: Mapping[str, str] = field(default_factory=dict)
    with_directives: bool = True
    keep_parent_field: bool = False
    skip: tuple[str, ...] = ()


def parse_options(options: Optional[FieldsListOptions] = None) -> ParsedOptions:
    """
    Apply defaults to the given options and check that they have the
    expected shape. Options are read only, the caller's dict is left as is.
    """
    if not options:
        return ParsedOptions()

    unknown = [key for key in options if key not in DEFAULT_OPTIONS]
    if unknown:
        raise ValidationError(f"Unknown options: {', '.join(sorted(unknown))}")

    merged = {**DEFAULT_OPTIONS, **options}

    path = merged["path"]
    if path is None:
        path = ""
    if not isinstance(path, str):
        raise ValidationError("`path` must be a dot-notation string")

    transform = merged["transform"] or {}
    if not isinstance(transform, Mapping):
        raise ValidationError("`transform` must be a mapping of field names")

    skip = merged["skip"] or []
    if isinstance(skip, str):
        # a bare string would otherwise be iterated char by char
        raise ValidationError("`skip` must be a list of patterns, not a string")
    skip = tuple(skip)
    if not all(isinstance(pattern, str) for pattern in skip):
        raise ValidationError("`skip` patterns must be strings")

    with_directives = merged["with_directives"]
    if with_directives is None:
        with_directives = True

    return ParsedOptions(
        path=path,
        transform=transform,
        with_directives=bool(with_directives),
        keep_parent_field=bool(merged["keep_parent_field"]),
        skip=skip,
    )
