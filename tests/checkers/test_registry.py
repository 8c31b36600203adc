"""
Tests for CheckerRegistry.
"""

import pytest

from spamguard.checkers import AIChecker, KeywordsChecker
from spamguard.checkers.registry import CheckerRegistry, register_checker
from spamguard.core.checker import Checker, CheckerParams


@pytest.fixture
def clean_registry():
    """Snapshot and restore registrations around a test."""
    saved = dict(CheckerRegistry._checkers)
    yield CheckerRegistry
    CheckerRegistry._checkers.clear()
    CheckerRegistry._checkers.update(saved)


class AlwaysPass(Checker):

    def __init__(self, label: str = "always_pass"):
        self._label = label

    @property
    def name(self) -> str:
        return self._label

    async def check(self, params: CheckerParams) -> bool:
        return True


class TestRegistry:

    def test_builtin_checkers_registered(self):
        assert CheckerRegistry.is_registered("ai")
        assert CheckerRegistry.is_registered("keywords")
        assert set(CheckerRegistry.list_checkers()) >= {"ai", "keywords"}

    def test_register_and_get(self, clean_registry):
        clean_registry.register("always_pass", AlwaysPass)

        assert clean_registry.get("always_pass") is AlwaysPass

    def test_get_unknown_is_none(self):
        assert CheckerRegistry.get("nope") is None

    def test_create_passes_kwargs(self, clean_registry):
        clean_registry.register("always_pass", AlwaysPass)

        checker = clean_registry.create("always_pass", label="custom")

        assert isinstance(checker, AlwaysPass)
        assert checker.name == "custom"

    def test_create_unknown_lists_available(self):
        with pytest.raises(ValueError, match="Unknown checker: 'nope'") as exc_info:
            CheckerRegistry.create("nope")

        assert "keywords" in str(exc_info.value)

    def test_create_builtins(self):
        ai = CheckerRegistry.create("ai", api_key="k", model="m", host="https://h.io/")
        kw = CheckerRegistry.create("keywords", keywords=["spam"])

        assert isinstance(ai, AIChecker)
        assert ai.host == "h.io"
        assert isinstance(kw, KeywordsChecker)

    def test_overwrite_warns(self, clean_registry, caplog):
        clean_registry.register("always_pass", AlwaysPass)
        clean_registry.register("always_pass", AlwaysPass)

        assert "Overwriting existing checker registration: always_pass" in caplog.text

    def test_clear(self, clean_registry):
        clean_registry.clear()

        assert clean_registry.list_checkers() == []


class TestDecorator:

    def test_register_checker_decorator(self, clean_registry):
        @register_checker("decorated")
        class Decorated(AlwaysPass):
            pass

        assert clean_registry.get("decorated") is Decorated
