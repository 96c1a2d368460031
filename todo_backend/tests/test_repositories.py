import threading
from datetime import datetime, timezone

from todo_api.repositories import InMemoryRepository

DUE = datetime(2099, 1, 1, tzinfo=timezone.utc)


def make_todo(repo, name="task"):
    return repo.add({"id": repo.allocate_id(), "name": name, "due_date": DUE, "is_completed": False})


class TestInMemoryRepository:
    def test_empty(self):
        repo = InMemoryRepository()
        assert repo.get_all() == []
        assert repo.get_by_id(1) is None

    def test_add_and_get(self):
        repo = InMemoryRepository()
        created = make_todo(repo, "a")
        assert created["id"] == 1
        assert repo.get_by_id(1) == created

    def test_get_all_keeps_insertion_order(self):
        repo = InMemoryRepository()
        for name in ["x", "y", "z"]:
            make_todo(repo, name)
        assert [t["name"] for t in repo.get_all()] == ["x", "y", "z"]

    def test_returned_items_are_copies(self):
        repo = InMemoryRepository()
        make_todo(repo)
        repo.get_by_id(1)["is_completed"] = True
        repo.get_all()[0]["name"] = "changed"

        stored = repo.get_by_id(1)
        assert stored["is_completed"] is False
        assert stored["name"] == "task"

    def test_toggle_completed(self):
        repo = InMemoryRepository()
        make_todo(repo)
        assert repo.toggle_completed(1)["is_completed"] is True
        assert repo.toggle_completed(1)["is_completed"] is False
        assert repo.toggle_completed(2) is None

    def test_delete_is_idempotent(self):
        repo = InMemoryRepository()
        make_todo(repo)
        repo.delete_by_id(1)
        repo.delete_by_id(1)
        repo.delete_by_id(99)
        assert repo.get_all() == []

    def test_delete_removes_all_matches(self):
        repo = InMemoryRepository()
        for _ in range(2):
            repo.add({"id": 5, "name": "dup", "due_date": DUE, "is_completed": False})
        repo.delete_by_id(5)
        assert repo.get_all() == []

    def test_allocated_ids_strictly_increase(self):
        repo = InMemoryRepository()
        make_todo(repo)
        make_todo(repo)
        repo.delete_by_id(2)
        assert make_todo(repo)["id"] == 3

    def test_add_with_explicit_id_advances_counter(self):
        repo = InMemoryRepository()
        repo.add({"id": 10, "name": "seed", "due_date": DUE, "is_completed": False})
        assert repo.allocate_id() == 11

    def test_concurrent_creates_get_distinct_ids(self):
        repo = InMemoryRepository()
        threads_count, per_thread = 8, 50
        start = threading.Barrier(threads_count)

        def worker():
            start.wait()
            for _ in range(per_thread):
                make_todo(repo)

        threads = [threading.Thread(target=worker) for _ in range(threads_count)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        ids = [t["id"] for t in repo.get_all()]
        assert len(ids) == threads_count * per_thread
        assert len(set(ids)) == len(ids)
        assert sorted(ids) == list(range(1, threads_count * per_thread + 1))
