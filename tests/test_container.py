"""
Test Container entity and collection coercion.
"""

import pytest

from neo_blobstore import Container, to_collection


def test_container_defaults():
    """Test a new container has the given id, data and no expiry."""
    container = Container("blobstore:Foo:bar", {"a": 1})

    assert container.id == "blobstore:Foo:bar"
    assert container.get_id() == "blobstore:Foo:bar"
    assert container.data == {"a": 1}
    assert container.get_data() == {"a": 1}
    assert container.expiry == 0
    assert container.get_expiry() == 0


def test_container_without_data_is_empty():
    assert Container("Foo:bar").data == {}


def test_container_copies_data_on_construction():
    """Test later changes to the source collection do not leak into the container."""
    source = {"a": 1}
    container = Container("Foo:bar", source)
    source["b"] = 2

    assert container.data == {"a": 1}

    items = ["x"]
    listed = Container("Foo:baz", items)
    items.append("y")

    assert listed.data == ["x"]


def test_container_copies_nested_data():
    source = {"n": {"x": 1}, "items": [[1]]}
    container = Container("Foo:bar", source)
    source["n"]["x"] = 99
    source["items"][0].append(2)

    assert container.data == {"n": {"x": 1}, "items": [[1]]}


def test_container_id_is_read_only():
    container = Container("Foo:bar", {})

    with pytest.raises(AttributeError):
        container.id = "Foo:other"


def test_set_expiry():
    container = Container("Foo:bar", {})
    container.set_expiry_in_seconds(42)

    assert container.get_expiry() == 42


@pytest.mark.parametrize("expiry", [-1, 1.5, "10", True])
def test_set_expiry_rejects_invalid_values(expiry):
    container = Container("Foo:bar", {})

    with pytest.raises(ValueError):
        container.set_expiry_in_seconds(expiry)


def test_container_equality_is_structural():
    """Test equality compares id, data and expiry."""
    assert Container("Foo:bar", {"a": 1}) == Container("Foo:bar", {"a": 1})
    assert Container("Foo:bar", {"a": 1}) != Container("Foo:baz", {"a": 1})
    assert Container("Foo:bar", {"a": 1}) != Container("Foo:bar", {"a": 2})

    with_expiry = Container("Foo:bar", {"a": 1})
    with_expiry.set_expiry_in_seconds(5)
    assert with_expiry != Container("Foo:bar", {"a": 1})


@pytest.mark.parametrize("value,expected", [
    (None, {}),
    ({"a": 1}, {"a": 1}),
    ([1, 2], [1, 2]),
    ((1, 2), [1, 2]),
    (False, [False]),
    (0, [0]),
    ("text", ["text"]),
])
def test_to_collection(value, expected):
    assert to_collection(value) == expected
