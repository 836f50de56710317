from .config import FieldsListOptions
from .exceptions import FieldsListError, ValidationError
from .fields import fields_list, fields_map, fields_projection, fields_tree
from .helpers.selection import LEAF, Branch, Leaf

__all__ = [
    "LEAF",
    "Branch",
    "FieldsListError",
    "FieldsListOptions",
    "Leaf",
    "ValidationError",
    "fields_list",
    "fields_map",
    "fields_projection",
    "fields_tree",
]
