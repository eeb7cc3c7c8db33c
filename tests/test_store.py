"""Tests for the in-memory repository."""

import threading

from todo_api.app.models.todo import ToDo
from todo_api.app.repositories import InMemoryToDoStore, ToDoRepository


def test_store_implements_repository_contract(store):
    assert isinstance(store, ToDoRepository)


def test_save_assigns_increasing_ids_from_one(store):
    ids = [store.save(ToDo(title=f"task {i}")).id for i in range(5)]
    assert ids == [1, 2, 3, 4, 5]


def test_save_with_id_overwrites(store):
    todo = store.save(ToDo(title="first"))
    store.save(ToDo(title="second", id=todo.id))

    assert store.count() == 1
    assert store.find_by_id(todo.id).title == "second"


def test_explicit_id_advances_sequence(store):
    store.save(ToDo(title="imported", id=10))
    created = store.save(ToDo(title="new"))
    assert created.id == 11


def test_find_by_id_missing_returns_none(store):
    assert store.find_by_id(42) is None


def test_delete_missing_is_noop(store):
    store.save(ToDo(title="keep"))
    store.delete_by_id(99)
    assert store.count() == 1


def test_exists_and_delete(store):
    todo = store.save(ToDo(title="gone soon"))
    assert store.exists(todo.id)
    store.delete_by_id(todo.id)
    assert not store.exists(todo.id)
    assert store.find_all() == []


def test_returned_records_are_copies(store):
    original = ToDo(title="original")
    saved = store.save(original)
    assert original.id is None

    saved.title = "mutated"
    fetched = store.find_by_id(saved.id)
    fetched.completed = True

    stored = store.find_by_id(saved.id)
    assert stored.title == "original"
    assert stored.completed is False


def test_clear_resets_sequence(store):
    store.save(ToDo(title="a"))
    store.save(ToDo(title="b"))
    store.clear()

    assert store.count() == 0
    assert store.save(ToDo(title="c")).id == 1


def test_concurrent_creation_yields_unique_ids():
    store = InMemoryToDoStore()
    per_thread = 50
    results = []
    results_lock = threading.Lock()

    def worker():
        ids = [store.save(ToDo(title="t")).id for _ in range(per_thread)]
        with results_lock:
            results.extend(ids)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 8 * per_thread
    assert sorted(results) == list(range(1, 8 * per_thread + 1))
    assert store.count() == 8 * per_thread


def test_concurrent_saves_to_distinct_ids_keep_every_record():
    store = InMemoryToDoStore()
    threads_count, per_thread = 8, 50

    def worker(offset):
        for i in range(per_thread):
            todo_id = offset * per_thread + i + 1
            store.save(ToDo(title=f"item {todo_id}", id=todo_id))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(threads_count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    total = threads_count * per_thread
    assert store.count() == total
    for todo_id in range(1, total + 1):
        assert store.find_by_id(todo_id).title == f"item {todo_id}"
    assert store.save(ToDo(title="next")).id == total + 1


def test_concurrent_saves_to_same_id_last_writer_wins():
    store = InMemoryToDoStore()
    store.save(ToDo(title="seed", id=1))
    titles = [f"writer {n}" for n in range(8)]
    barrier = threading.Barrier(len(titles))

    def worker(title):
        barrier.wait()
        store.save(ToDo(title=title, id=1))

    threads = [threading.Thread(target=worker, args=(title,)) for title in titles]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert store.count() == 1
    assert store.find_by_id(1).title in titles
    store.save(ToDo(title="final", id=1))
    assert store.find_by_id(1).title == "final"
