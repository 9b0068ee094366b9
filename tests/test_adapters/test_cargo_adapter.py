"""Tests for the cargo adapter."""

import json
import subprocess
from unittest.mock import Mock, patch

import pytest

from avrflash.adapters.cargo_adapter import (
    CargoAdapter,
    create_cargo_adapter,
)
from avrflash.config.models import CargoMetadata
from avrflash.core.errors import MetadataError, SpawnError
from avrflash.protocols import CargoAdapterProtocol
from avrflash.utils.stream_process import PassthroughStderrMiddleware
from tests.factories import PACKAGE_ID, artifact_message, metadata_document, package_entry


class TestCargoAdapterBuild:
    """Tests for CargoAdapter.build."""

    def test_build_appends_message_format(self):
        adapter = CargoAdapter()
        mock_run_command = Mock(return_value=(0, [artifact_message()], []))

        with patch("avrflash.utils.stream_process.run_command", mock_run_command):
            return_code, stdout = adapter.build(["--release", "--bin", "blink"])

        assert return_code == 0
        assert stdout == [artifact_message()]
        cmd, middleware = mock_run_command.call_args.args
        assert cmd == [
            "cargo",
            "build",
            "--release",
            "--bin",
            "blink",
            "--message-format=json",
        ]
        assert isinstance(middleware, PassthroughStderrMiddleware)

    def test_build_uses_configured_cargo(self):
        adapter = create_cargo_adapter(cargo="/opt/cargo/bin/cargo")
        mock_run_command = Mock(return_value=(101, [], []))

        with patch("avrflash.utils.stream_process.run_command", mock_run_command):
            return_code, _ = adapter.build([])

        assert return_code == 101
        assert mock_run_command.call_args.args[0][0] == "/opt/cargo/bin/cargo"

    def test_build_spawn_failure(self):
        adapter = CargoAdapter(cargo="no-such-cargo")

        with (
            patch(
                "avrflash.utils.stream_process.run_command",
                side_effect=FileNotFoundError("No such file or directory"),
            ),
            pytest.raises(SpawnError, match="failed to run `no-such-cargo`"),
        ):
            adapter.build([])

    def test_implements_protocol(self):
        assert isinstance(CargoAdapter(), CargoAdapterProtocol)


class TestCargoAdapterMetadata:
    """Tests for CargoAdapter.metadata."""

    def _completed(self, returncode: int = 0, stdout: str = "", stderr: str = ""):
        return subprocess.CompletedProcess(
            args=["cargo", "metadata"], returncode=returncode, stdout=stdout, stderr=stderr
        )

    def test_parses_metadata(self):
        document = metadata_document(
            package_entry(metadata={"avrflash": {"args": ["{}"]}})
        )

        with patch(
            "avrflash.adapters.cargo_adapter.subprocess.run",
            return_value=self._completed(stdout=json.dumps(document)),
        ) as mock_run:
            metadata = CargoAdapter().metadata()

        assert isinstance(metadata, CargoMetadata)
        package = metadata.find_package(PACKAGE_ID)
        assert package is not None
        assert package.metadata == {"avrflash": {"args": ["{}"]}}
        assert mock_run.call_args.args[0] == [
            "cargo",
            "metadata",
            "--format-version",
            "1",
        ]

    def test_nonzero_exit(self):
        with (
            patch(
                "avrflash.adapters.cargo_adapter.subprocess.run",
                return_value=self._completed(
                    returncode=101, stderr="error: could not find `Cargo.toml`"
                ),
            ),
            pytest.raises(MetadataError, match="could not find `Cargo.toml`"),
        ):
            CargoAdapter().metadata()

    def test_invalid_json(self):
        with (
            patch(
                "avrflash.adapters.cargo_adapter.subprocess.run",
                return_value=self._completed(stdout="not json"),
            ),
            pytest.raises(MetadataError, match="invalid `cargo metadata` output"),
        ):
            CargoAdapter().metadata()

    def test_spawn_failure(self):
        with (
            patch(
                "avrflash.adapters.cargo_adapter.subprocess.run",
                side_effect=FileNotFoundError("cargo"),
            ),
            pytest.raises(SpawnError),
        ):
            CargoAdapter().metadata()
