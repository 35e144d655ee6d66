import pytest
from op_credentials.errors import SecretNotFound
from op_credentials.store import SecretStore, get_secret_store, reset_secret_store


def test_put_then_take_removes(store: SecretStore) -> None:
    store.put("TEST_SECRET", "secret_value")
    assert store.take("TEST_SECRET") == "secret_value"
    assert "TEST_SECRET" not in store


def test_put_then_peek_keeps(store: SecretStore) -> None:
    store.put("TEST_SECRET", "secret_value")
    assert store.peek("TEST_SECRET") == "secret_value"
    assert store.peek("TEST_SECRET") == "secret_value"
    assert "TEST_SECRET" in store


def test_put_expands_escaped_newlines(store: SecretStore) -> None:
    store.put("MULTILINE_SECRET", "line1\\nline2\\nline3")
    assert store.peek("MULTILINE_SECRET") == "line1\nline2\nline3"


def test_put_overwrites(store: SecretStore) -> None:
    store.put("KEY", "first")
    store.put("KEY", "second")
    assert store.take("KEY") == "second"
    assert len(store) == 0


@pytest.mark.parametrize("method", ["take", "peek"])
def test_missing_label(store: SecretStore, method: str) -> None:
    with pytest.raises(SecretNotFound, match="Secret `MISSING_SECRET` not found in 1Password") as exc_info:
        getattr(store, method)("MISSING_SECRET")
    assert exc_info.value.label == "MISSING_SECRET"


def test_take_twice_fails(store: SecretStore) -> None:
    store.put("ONCE", "value")
    store.take("ONCE")
    with pytest.raises(SecretNotFound):
        store.take("ONCE")


def test_labels_and_reset(store: SecretStore) -> None:
    store.put("A", "1")
    store.put("B", "2")
    assert sorted(store.labels()) == ["A", "B"]
    store.reset()
    assert len(store) == 0


def test_global_store_is_shared() -> None:
    first = get_secret_store()
    first.put("SHARED", "value")
    assert get_secret_store() is first
    assert get_secret_store().peek("SHARED") == "value"


def test_reset_global_store_replaces_instance() -> None:
    old = get_secret_store()
    old.put("SHARED", "value")
    new = reset_secret_store()
    assert new is not old
    assert get_secret_store() is new
    assert "SHARED" not in new
