"""
Test BlobStore end to end over the in-memory cache.
"""

import pickle

from neo_blobstore import BlobStore, Container, FixedLruCache, JSONBlobSerializer, TrackerKey


def tracked_ids(cache, prefix: str, namespace: str) -> list:
    payload = cache.fetch(TrackerKey(prefix, namespace).value)
    return list(pickle.loads(payload)) if payload else []


def test_read_unknown_id_on_empty_cache(store, memory_cache):
    container = store.read("bar")

    assert container == Container("blobstore:Foo:bar", {})
    assert tracked_ids(memory_cache, "blobstore", "Foo") == ["blobstore:Foo:bar"]
    assert store.read("bar").data == {}


def test_save_then_read_round_trip(store, memory_cache):
    """Test data saved by one store is read back by an independent store."""
    container = store.read("bar")
    payload = {"title": "Foo", "values": [1, 2, 3], "nested": {"ok": True}}
    store.save(Container(container.id, payload))

    other = BlobStore("Foo", memory_cache, accelerator=FixedLruCache(capacity=10))

    assert other.read("bar").data == payload


def test_exists_before_and_after_save(store):
    assert store.exists("bar") is False

    store.save(Container(store.get_key("bar"), {"a": 1}))

    assert store.exists("bar") is True


def test_delete_removes_key_and_tracking_entry(store, memory_cache):
    container = store.read("bar")
    store.save(Container(container.id, {"a": 1}))

    store.delete("bar")

    assert store.exists("bar") is False
    assert "blobstore:Foo:bar" not in tracked_ids(memory_cache, "blobstore", "Foo")
    assert store.read("bar").data == {}


def test_drop_deletes_only_own_namespace(memory_cache):
    foo = BlobStore("Foo", memory_cache, accelerator=FixedLruCache(capacity=10))
    bar = BlobStore("Bar", memory_cache, accelerator=FixedLruCache(capacity=10))

    for store, ids in ((foo, ["a", "b"]), (bar, ["c"])):
        for id in ids:
            store.save(Container(store.read(id).id, {"id": id}))

    assert foo.drop() == 2

    assert not foo.exists("a")
    assert not foo.exists("b")
    assert bar.exists("c")
    assert bar.read("c").data == {"id": "c"}


def test_drop_evicts_accelerator(store):
    store.save(Container(store.read("bar").id, {"a": 1}))
    assert store.read("bar").data == {"a": 1}

    store.drop()

    assert store.read("bar").data == {}


def test_repeated_drop_is_harmless(store):
    store.save(Container(store.read("bar").id, {"a": 1}))

    assert store.drop() == 1
    assert store.drop() == 1
    assert not store.exists("bar")


def test_drop_on_empty_namespace(store):
    assert store.drop() == 0


def test_saved_container_expires(store, memory_cache, clock):
    container = store.read("bar")
    container = Container(container.id, {"a": 1})
    container.set_expiry_in_seconds(10)
    store.save(container)

    clock.advance(11)

    assert store.exists("bar") is False
    assert store.read("bar").data == {}


def test_tracking_record_never_expires(store, memory_cache, clock):
    store.set_expiry_in_seconds(5)
    store.save(store.read("bar"))

    clock.advance(3600)

    assert tracked_ids(memory_cache, "blobstore", "Foo") == ["blobstore:Foo:bar"]


def test_prefix_scopes_namespaces(memory_cache):
    store = BlobStore("Foo", memory_cache, accelerator=FixedLruCache(capacity=10))
    store.set_namespace_prefix("coffee")
    store.save(Container(store.read("bar").id, {"a": 1}))

    assert memory_cache.contains("coffee:Foo:bar")
    assert tracked_ids(memory_cache, "coffee", "Foo") == ["coffee:Foo:bar"]
    assert tracked_ids(memory_cache, "blobstore", "Foo") == []


def test_json_serializer_round_trip(memory_cache):
    store = BlobStore(
        "Foo",
        memory_cache,
        serializer=JSONBlobSerializer(),
        accelerator=FixedLruCache(capacity=10)
    )
    store.save(Container(store.read("bar").id, {"a": [1, 2]}))

    other = BlobStore(
        "Foo",
        memory_cache,
        serializer=JSONBlobSerializer(),
        accelerator=FixedLruCache(capacity=10)
    )

    assert other.read("bar").data == {"a": [1, 2]}
    assert other.drop() == 1
    assert not other.exists("bar")


def test_changing_read_data_does_not_change_stored_data(store):
    """Test nested values handed out by read are detached from the accelerator."""
    store.save(Container(store.get_key("bar"), {"n": {"x": 1}}))

    container = store.read("bar")
    container.data["n"]["x"] = 99

    assert store.read("bar").data == {"n": {"x": 1}}


def test_changing_saved_source_does_not_change_stored_data(store):
    source = {"n": {"x": 1}}
    container = Container(store.get_key("bar"), source)
    store.save(container)

    container.data["n"]["x"] = 99

    assert store.read("bar").data == {"n": {"x": 1}}


def test_json_store_reads_back_tag_shaped_data(memory_cache):
    store = BlobStore(
        "Foo",
        memory_cache,
        serializer=JSONBlobSerializer(),
        accelerator=FixedLruCache(capacity=10)
    )
    payload = {"a": {"__set__": [1]}, "b": {"__bytes__": "not-hex"}}
    store.save(Container(store.get_key("bar"), payload))

    other = BlobStore(
        "Foo",
        memory_cache,
        serializer=JSONBlobSerializer(),
        accelerator=FixedLruCache(capacity=10)
    )

    assert other.read("bar").data == payload
