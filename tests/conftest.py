"""Shared fixtures."""

from __future__ import annotations

import pytest

from helpers import RecordingBackend


@pytest.fixture
def recording_backend():
    return RecordingBackend()
