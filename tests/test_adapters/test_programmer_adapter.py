"""Tests for the programmer adapter."""

from unittest.mock import Mock, patch

import pytest

from avrflash.adapters.programmer_adapter import (
    ProgrammerAdapter,
    create_programmer_adapter,
)
from avrflash.core.errors import SpawnError
from avrflash.protocols import ProgrammerAdapterProtocol
from avrflash.utils.stream_process import CaptureOutputMiddleware


def test_run_returns_stderr_only():
    adapter = create_programmer_adapter()
    mock_run_command = Mock(return_value=(1, [], ["avrdude: error: no device"]))

    with patch("avrflash.utils.stream_process.run_command", mock_run_command):
        return_code, stderr = adapter.run(["-p", "m328p", "-U", "flash:w:a.elf:e"])

    assert return_code == 1
    assert stderr == ["avrdude: error: no device"]

    cmd, middleware = mock_run_command.call_args.args
    assert cmd == ["avrdude", "-p", "m328p", "-U", "flash:w:a.elf:e"]
    assert isinstance(middleware, CaptureOutputMiddleware)
    assert middleware.capture_stdout is False
    assert middleware.capture_stderr is True


def test_run_uses_configured_executable():
    adapter = ProgrammerAdapter(executable="/usr/local/bin/avrdude")
    mock_run_command = Mock(return_value=(0, [], []))

    with patch("avrflash.utils.stream_process.run_command", mock_run_command):
        adapter.run([])

    assert mock_run_command.call_args.args[0] == ["/usr/local/bin/avrdude"]


def test_spawn_failure():
    adapter = ProgrammerAdapter()

    with (
        patch(
            "avrflash.utils.stream_process.run_command",
            side_effect=PermissionError("Permission denied"),
        ),
        pytest.raises(SpawnError, match="failed to run `avrdude`: Permission denied"),
    ):
        adapter.run(["-v"])


def test_implements_protocol():
    assert isinstance(ProgrammerAdapter(), ProgrammerAdapterProtocol)
