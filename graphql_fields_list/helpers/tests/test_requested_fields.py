from ..requested_fields import get_branch, to_dot_notation, to_projection
from ..selection import LEAF, Branch

TREE = Branch(
    {
        "id": LEAF,
        "owner": Branch(
            {
                "username": LEAF,
                "repository": Branch({"name": LEAF, "private": LEAF}),
            }
        ),
        "empty": Branch(),
    }
)


def test_to_dot_notation():
    assert to_dot_notation("", "a") == "a"
    assert to_dot_notation("a.b", "c") == "a.b.c"


def test_get_branch():
    assert get_branch(TREE) is TREE
    assert get_branch(TREE, "") is TREE
    assert get_branch(TREE, "owner.repository") == Branch(
        {"name": LEAF, "private": LEAF}
    )


def test_get_branch_not_found():
    assert get_branch(TREE, "x.y") == Branch()
    assert get_branch(TREE, "owner.missing") == Branch()


def test_get_branch_of_leaf_is_empty():
    assert get_branch(TREE, "id") == Branch()
    assert get_branch(TREE, "owner.username.more") == Branch()


def test_projection():
    assert to_projection(TREE) == {
        "id": 1,
        "owner.username": 1,
        "owner.repository.name": 1,
        "owner.repository.private": 1,
    }


def test_projection_keeps_breadth_first_order():
    assert list(to_projection(TREE, keep_parent_field=True)) == [
        "id",
        "owner",
        "empty",
        "owner.username",
        "owner.repository",
        "owner.repository.name",
        "owner.repository.private",
    ]


def test_projection_of_flat_tree():
    tree = Branch({"a": LEAF, "b": LEAF, "c": LEAF})
    assert to_projection(tree) == {"a": 1, "b": 1, "c": 1}


def test_projection_transform():
    projection = to_projection(
        TREE,
        transform={"id": "_id", "owner.repository.name": "owner.repository.fullName"},
    )
    assert projection == {
        "_id": 1,
        "owner.username": 1,
        "owner.repository.fullName": 1,
        "owner.repository.private": 1,
    }


def test_projection_transform_applies_to_full_paths_only():
    projection = to_projection(TREE, transform={"name": "fullName"})
    assert "owner.repository.name" in projection
    assert "fullName" not in projection


def test_projection_of_empty_tree():
    assert to_projection(Branch()) == {}
    assert to_projection(Branch(), keep_parent_field=True) == {}
