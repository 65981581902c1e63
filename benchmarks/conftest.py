from __future__ import annotations

import contextlib

import pytest


def pytest_configure(config: pytest.Config) -> None:
    # Coverage tracing distorts timings.
    with contextlib.suppress(AttributeError):
        config.option.no_cov = True
