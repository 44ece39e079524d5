import threading

import pytest

from vulcan_qa.shared.context import ScenarioContext, ScenarioKeys


def test_put_and_typed_get():
    ScenarioContext.put(ScenarioKeys.AUTH_TOKEN, "abc123")
    assert ScenarioContext.get(ScenarioKeys.AUTH_TOKEN, str) == "abc123"
    assert ScenarioContext.contains(ScenarioKeys.AUTH_TOKEN)


def test_get_missing_key_raises_key_error():
    with pytest.raises(KeyError, match="ScenarioContext key not found 'authToken'"):
        ScenarioContext.get(ScenarioKeys.AUTH_TOKEN, str)


def test_get_wrong_type_raises_type_error():
    ScenarioContext.put(ScenarioKeys.CREATED_USER_ID, 42)
    with pytest.raises(TypeError, match="is not of type str"):
        ScenarioContext.get(ScenarioKeys.CREATED_USER_ID, str)


def test_get_optional():
    assert ScenarioContext.get_optional(ScenarioKeys.AUTH_TOKEN, str) is None
    ScenarioContext.put(ScenarioKeys.AUTH_TOKEN, "t")
    assert ScenarioContext.get_optional(ScenarioKeys.AUTH_TOKEN, str) == "t"
    with pytest.raises(TypeError):
        ScenarioContext.get_optional(ScenarioKeys.AUTH_TOKEN, int)


def test_get_or_create_creates_once():
    calls = []

    def factory():
        calls.append(1)
        return ["created"]

    first = ScenarioContext.get_or_create("items", list, factory)
    second = ScenarioContext.get_or_create("items", list, factory)

    assert first is second
    assert len(calls) == 1


def test_get_or_create_checks_existing_type():
    ScenarioContext.put("items", "not a list")
    with pytest.raises(TypeError):
        ScenarioContext.get_or_create("items", list, list)


def test_remove_and_clear():
    ScenarioContext.put("a", 1)
    ScenarioContext.put("b", 2)

    ScenarioContext.remove("a")
    ScenarioContext.remove("never-there")
    assert not ScenarioContext.contains("a")
    assert ScenarioContext.snapshot() == {"b": 2}

    ScenarioContext.clear()
    assert ScenarioContext.snapshot() == {}


def test_values_do_not_leak_across_threads():
    ScenarioContext.put(ScenarioKeys.AUTH_TOKEN, "main-thread")
    seen = {}

    def worker():
        seen["contains"] = ScenarioContext.contains(ScenarioKeys.AUTH_TOKEN)
        ScenarioContext.put(ScenarioKeys.AUTH_TOKEN, "worker-thread")

    thread = threading.Thread(target=worker)
    thread.start()
    thread.join()

    assert seen["contains"] is False
    assert ScenarioContext.get(ScenarioKeys.AUTH_TOKEN, str) == "main-thread"
