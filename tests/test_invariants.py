from __future__ import annotations

import pytest

from annorder import NeverRaise, NeverThrown, never
from annorder.exceptions import AnnorderError, CatalogConfigError


def test_never_raises_with_env_payload() -> None:
    with pytest.raises(NeverThrown) as excinfo:
        never("position outside sequence", position=4, count=2)
    assert isinstance(excinfo.value, NeverRaise)
    assert excinfo.value.reason == "position outside sequence"
    assert excinfo.value.env_dict == {"count": 2, "position": 4}


def test_never_default_reason() -> None:
    with pytest.raises(NeverThrown, match="never\\(\\) marker reached"):
        never()


def test_catalog_config_error_is_annorder_error() -> None:
    error = CatalogConfigError("bad", kind="field", names=("Id",))
    assert isinstance(error, AnnorderError)
    assert (error.kind, error.names, str(error)) == ("field", ("Id",), "bad")
