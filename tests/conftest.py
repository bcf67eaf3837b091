"""Pytest fixtures and utilities for selectctl tests."""

import io
import tempfile
from pathlib import Path
from typing import Generator
from unittest.mock import MagicMock, patch

import pytest

from selectctl.api import Organization, Region, VMSize
from selectctl.context import SelectionContext
from selectctl.iostreams import IOStreams


class FakeTTY(io.StringIO):
    """In-memory stream that claims to be a terminal."""

    def isatty(self) -> bool:
        return True

    def fileno(self) -> int:
        return 0


class FakeClient:
    """PlatformClient returning fixed data and counting calls."""

    def __init__(self, orgs=None, regions=None, default_region=None, vm_sizes=None, error=None):
        self.orgs = list(orgs or [])
        self.regions = list(regions or [])
        self.default_region = default_region
        self.vm_sizes = list(vm_sizes or [])
        self.error = error
        self.calls: list[str] = []

    def _check(self, name: str) -> None:
        self.calls.append(name)
        if self.error is not None:
            raise self.error

    def get_organizations(self):
        self._check("get_organizations")
        return list(self.orgs)

    def platform_regions(self):
        self._check("platform_regions")
        return list(self.regions), self.default_region

    def platform_vm_sizes(self):
        self._check("platform_vm_sizes")
        return list(self.vm_sizes)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def tty_session() -> IOStreams:
    """Session whose streams look like a terminal."""
    return IOStreams(FakeTTY(), FakeTTY(), io.StringIO())


@pytest.fixture
def pipe_session() -> IOStreams:
    """Session whose streams are plain buffers."""
    return IOStreams(io.StringIO(), io.StringIO(), io.StringIO())


@pytest.fixture
def mock_orgs() -> list[Organization]:
    return [
        Organization(id="1", slug="personal", name="Jane Doe", type="PERSONAL"),
        Organization(id="2", slug="zeta", name="Zeta", type="SHARED"),
        Organization(id="3", slug="acme", name="Acme", type="SHARED"),
    ]


@pytest.fixture
def mock_regions() -> list[Region]:
    return [
        Region(code="syd", name="Sydney, Australia"),
        Region(code="ams", name="Amsterdam, Netherlands"),
        Region(code="ord", name="Chicago, Illinois (US)"),
    ]


@pytest.fixture
def mock_vm_sizes() -> list[VMSize]:
    return [
        VMSize(name="performance-1x", cpu_cores=1, memory_mb=2048),
        VMSize(name="shared-cpu-2x", cpu_cores=2, memory_mb=512),
        VMSize(name="shared-cpu-1x", cpu_cores=1, memory_mb=256),
    ]


@pytest.fixture
def make_context():
    """Factory for SelectionContext instances."""

    def _create(session: IOStreams, client: FakeClient, **presets) -> SelectionContext:
        return SelectionContext(session=session, client=client, **presets)

    return _create


@pytest.fixture
def mock_questionary() -> Generator[MagicMock, None, None]:
    """Replace questionary and the prompt_toolkit stream binding in selectctl.prompt."""
    with patch("selectctl.prompt.questionary") as mock_q, patch(
        "selectctl.prompt.create_input"
    ), patch("selectctl.prompt.create_output"):
        yield mock_q
