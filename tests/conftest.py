from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest

from jsonrpc_kit.observability.obs import api as obs


@pytest.fixture(autouse=True)
def _reset_obs_sink() -> Iterator[None]:
    yield
    obs.set_sink(None)


class RecordingProcedure:
    """Procedure double that records validate/execute calls."""

    def __init__(self, result: Any = None) -> None:
        self.result = result
        self.exception: Exception | None = None
        self.validation_exception: Exception | None = None
        self.validated: list[Any] = []
        self.executed: list[tuple[Any, Any]] = []

    def validate(self, params: Any) -> None:
        self.validated.append(params)
        if self.validation_exception is not None:
            raise self.validation_exception

    def execute(self, params: Any, id: Any) -> Any:
        self.executed.append((params, id))
        if self.exception is not None:
            raise self.exception
        return self.result


@pytest.fixture
def recording_procedure() -> type[RecordingProcedure]:
    return RecordingProcedure


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """
    Default behavior: only run unit tests.

    If the user explicitly provides `-m ...`, we respect it and do not apply
    any extra deselection logic.
    """
    if config.option.markexpr:
        return

    deselect: list[pytest.Item] = []
    keep: list[pytest.Item] = []

    for item in items:
        if item.get_closest_marker("integration") or item.get_closest_marker("e2e"):
            deselect.append(item)
        else:
            keep.append(item)

    if deselect:
        config.hook.pytest_deselected(items=deselect)
        items[:] = keep
