"""Core test fixtures for the avrflash project."""

import os
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import pytest
from typer.testing import CliRunner

from avrflash.config.models import CargoMetadata
from avrflash.protocols import CargoAdapterProtocol, ProgrammerAdapterProtocol
from tests.factories import (
    artifact_message,
    build_finished_message,
    cargo_metadata,
    package_entry,
)


# ---- Base Fixtures ----


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def isolated_env(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """Run in an empty directory with no avrflash config from the environment."""
    for key in list(os.environ):
        if key.upper().startswith("AVRFLASH_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)
    yield tmp_path


# ---- Project Fixtures ----


@pytest.fixture
def avrdude_template() -> list[str]:
    return [
        "-p",
        "atmega328p",
        "-c",
        "arduino",
        "-P",
        "/dev/ttyACM0",
        "-U",
        "flash:w:{}:e",
    ]


@pytest.fixture
def metadata_factory(
    avrdude_template: list[str],
) -> Callable[..., CargoMetadata]:
    """Create cargo metadata whose only package has the given avrflash table.

    Pass avrflash=None for a package without any metadata.
    """

    def factory(avrflash: Any = ..., **package: Any) -> CargoMetadata:
        if avrflash is ...:
            avrflash = {"args": avrdude_template}
        metadata = None if avrflash is None else {"avrflash": avrflash}
        return cargo_metadata(package_entry(metadata=metadata, **package))

    return factory


# ---- Adapter Mocks ----


@pytest.fixture
def mock_cargo_adapter(metadata_factory: Callable[..., CargoMetadata]) -> Mock:
    """Cargo adapter that builds one binary that has a valid template."""
    adapter = Mock(spec=CargoAdapterProtocol)
    adapter.build.return_value = (0, [artifact_message(), build_finished_message()])
    adapter.metadata.return_value = metadata_factory()
    return adapter


@pytest.fixture
def mock_programmer_adapter() -> Mock:
    """Programmer adapter that succeeds."""
    adapter = Mock(spec=ProgrammerAdapterProtocol)
    adapter.run.return_value = (0, ["avrdude: 1024 bytes of flash verified"])
    return adapter
