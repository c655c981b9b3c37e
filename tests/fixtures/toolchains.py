"""Fake workspace scanners and environment probes for testing."""

import pytest

from toolchainenv.toolchain.probe import EnvironmentVersion
from toolchainenv.workspace.scanner import ManifestVersion


class FakeScanner:
    """Scanner returning a fixed manifest version and counting calls."""

    def __init__(self, version: str = None):
        self.result = (
            ManifestVersion(version=version, found=True)
            if version is not None
            else ManifestVersion()
        )
        self.calls = 0

    def required_version(self) -> ManifestVersion:
        self.calls += 1
        return self.result


class FakeProbe:
    """Probe returning a fixed environment version and counting calls."""

    def __init__(self, version: str = None):
        self.result = (
            EnvironmentVersion(version=version, found=True)
            if version is not None
            else EnvironmentVersion()
        )
        self.calls = 0

    def detect(self) -> EnvironmentVersion:
        self.calls += 1
        return self.result


@pytest.fixture
def fake_scanner():
    """Factory for FakeScanner instances."""
    return FakeScanner


@pytest.fixture
def fake_probe():
    """Factory for FakeProbe instances."""
    return FakeProbe
