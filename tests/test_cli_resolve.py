"""Tests for wren.cli._resolve — Router import resolution."""

import sys
import types

import pytest

from wren.cli._resolve import resolve_router
from wren.routing.router import Router


def _make_router() -> Router:
    router = Router()
    router.add_route("GET", "/", "home")
    return router


def _broken_factory() -> Router:
    msg = "boom"
    raise RuntimeError(msg)


@pytest.fixture
def _fake_module(monkeypatch: pytest.MonkeyPatch) -> None:
    mod = types.ModuleType("_fake_wren_urls")
    mod.router = Router()  # type: ignore[attr-defined]
    mod.custom = Router()  # type: ignore[attr-defined]
    mod.factory = _make_router  # type: ignore[attr-defined]
    mod.broken_factory = _broken_factory  # type: ignore[attr-defined]
    mod.not_a_router = "just a string"  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_wren_urls", mod)


@pytest.mark.usefixtures("_fake_module")
class TestResolveRouter:
    def test_explicit_attribute(self) -> None:
        assert isinstance(resolve_router("_fake_wren_urls:router"), Router)

    def test_custom_attribute(self) -> None:
        assert resolve_router("_fake_wren_urls:custom") is sys.modules["_fake_wren_urls"].custom

    def test_default_attribute(self) -> None:
        """Omitting :attr defaults to 'router'."""
        assert resolve_router("_fake_wren_urls") is sys.modules["_fake_wren_urls"].router

    def test_factory(self) -> None:
        router = resolve_router("_fake_wren_urls:factory")
        assert len(router) == 1

    def test_factory_error(self) -> None:
        with pytest.raises(TypeError, match=r"Router factory .* failed: boom"):
            resolve_router("_fake_wren_urls:broken_factory")

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            resolve_router("nonexistent_module_xyz:router")

    def test_missing_attribute(self) -> None:
        with pytest.raises(AttributeError):
            resolve_router("_fake_wren_urls:does_not_exist")

    def test_wrong_type(self) -> None:
        with pytest.raises(TypeError, match=r"not a wren\.Router instance"):
            resolve_router("_fake_wren_urls:not_a_router")
