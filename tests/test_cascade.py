from notegraph.core.history import NavigationHistory
from notegraph.services.cascade import CascadeCoordinator, RenameStage


def test_rename_success(store, cache):
    store.notes["Old"] = "body [[X]]"
    history = NavigationHistory()
    history.visit("Old")
    coord = CascadeCoordinator(cache, history=history)

    res = coord.rename("Old", "New")

    assert res.ok
    assert res.stage is None
    assert store.notes == {"New": "body [[X]]"}
    assert "Old" not in cache
    assert cache.peek("New") == "body [[X]]"
    assert history.current == "New"


def test_rename_missing_source(store, cache):
    res = CascadeCoordinator(cache).rename("Old", "New")

    assert not res.ok
    assert res.stage is RenameStage.SOURCE_NOT_FOUND
    assert store.notes == {}


def test_rename_target_exists(store, cache):
    store.notes.update({"Old": "old body", "New": "other body"})

    res = CascadeCoordinator(cache).rename("Old", "New")

    assert res.stage is RenameStage.TARGET_CREATE_FAILED
    assert store.notes == {"Old": "old body", "New": "other body"}


def test_rename_to_same_title_is_a_collision(store, cache):
    store.notes["A"] = "a"
    res = CascadeCoordinator(cache).rename("A", "A")
    assert res.stage is RenameStage.TARGET_CREATE_FAILED
    assert store.notes == {"A": "a"}


def test_rename_write_failure_cleans_up(store, cache):
    store.notes["Old"] = "old body"
    store.fail_on["write"] = {"New"}

    res = CascadeCoordinator(cache).rename("Old", "New")

    assert res.stage is RenameStage.TARGET_WRITE_FAILED
    assert res.cleanup_ok
    assert store.notes == {"Old": "old body"}
    assert cache.peek("Old") == "old body"
    assert "New" not in cache


def test_rename_write_failure_with_failed_cleanup(store, cache):
    store.notes["Old"] = "old body"
    store.fail_on["write"] = {"New"}
    store.fail_on["delete"] = {"New"}

    res = CascadeCoordinator(cache).rename("Old", "New")

    assert res.stage is RenameStage.TARGET_WRITE_FAILED
    assert not res.cleanup_ok
    assert store.notes["Old"] == "old body"


def test_rename_delete_failure_leaves_both_copies(store, cache):
    store.notes["Old"] = "keep me"
    store.fail_on["delete"] = {"Old"}
    history = NavigationHistory()
    history.visit("Old")

    res = CascadeCoordinator(cache, history=history).rename("Old", "New")

    assert not res.ok
    assert res.stage is RenameStage.SOURCE_DELETE_FAILED
    assert res.duplicated
    assert store.notes == {"Old": "keep me", "New": "keep me"}
    assert cache.peek("Old") == "keep me"
    assert cache.peek("New") == "keep me"
    assert history.current == "Old"


def test_delete(store, cache):
    store.notes["A"] = "a"
    cache.read("A")

    res = CascadeCoordinator(cache).delete("A")

    assert res.ok
    assert "A" not in store.notes
    assert "A" not in cache


def test_delete_missing(cache):
    res = CascadeCoordinator(cache).delete("A")
    assert not res.ok
    assert res.not_found


def test_delete_failure_keeps_cache(store, cache):
    store.notes["A"] = "a"
    cache.read("A")
    store.fail_on["delete"] = {"A"}

    res = CascadeCoordinator(cache).delete("A")

    assert not res.ok
    assert not res.not_found
    assert cache.peek("A") == "a"


def test_rename_when_source_vanished_after_read(store, cache):
    store.notes["Old"] = "x"
    cache.read("Old")
    del store.notes["Old"]
    history = NavigationHistory()
    history.visit("Old")

    res = CascadeCoordinator(cache, history=history).rename("Old", "New")

    assert res.ok
    assert not res.duplicated
    assert store.notes == {"New": "x"}
    assert "Old" not in cache
    assert cache.peek("New") == "x"
    assert history.current == "New"
