"""Tests for crumbs.__init__ — lazy import registry covers all public names."""

import pytest

import crumbs


@pytest.mark.parametrize("name", crumbs.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(crumbs, name)
    assert obj is not None, f"crumbs.{name} resolved to None"


def test_all_names_in_lazy_registry() -> None:
    missing = set(crumbs.__all__) - set(crumbs._LAZY_IMPORTS)
    assert not missing, f"Names in __all__ but not in _LAZY_IMPORTS: {sorted(missing)}"


def test_lazy_registry_no_extras() -> None:
    extras = set(crumbs._LAZY_IMPORTS) - set(crumbs.__all__)
    assert not extras, f"Names in _LAZY_IMPORTS but not in __all__: {sorted(extras)}"


def test_unknown_name_raises_attribute_error() -> None:
    with pytest.raises(AttributeError, match="no attribute"):
        crumbs.__getattr__("ThisDoesNotExist")


def test_top_level_round_trip() -> None:
    cookies = crumbs.RequestCookies("session=abc; theme=light")
    headers = crumbs.ResponseHeaders()
    crumbs.seal_mutable(cookies, headers).set("theme", "dark")
    assert headers.get_list("Set-Cookie") == ["theme=dark"]
