"""Global pytest configuration."""

from __future__ import annotations

from dataclasses import fields

import pytest

from pathfind.config import TRAVERSAL_CONFIG, TraversalConfig


@pytest.fixture(autouse=True)
def _restore_traversal_config():
    """Restore the global traversal config after tests that modify it."""
    saved = {f.name: getattr(TRAVERSAL_CONFIG, f.name) for f in fields(TraversalConfig)}
    yield
    for name, value in saved.items():
        setattr(TRAVERSAL_CONFIG, name, value)
