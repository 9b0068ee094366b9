"""Tests for binding the binary path into the argument template."""

import os
from pathlib import Path

import pytest

from avrflash.flash.arguments import PLACEHOLDER, instantiate_args, render_path


BINARY = Path("/work/target/avr-none/release/blink.elf")


def test_placeholder_is_replaced(avrdude_template):
    args = instantiate_args(avrdude_template, BINARY)

    assert args[-1] == f"flash:w:{BINARY}:e"
    assert args[:-1] == avrdude_template[:-1]


def test_every_occurrence_is_replaced():
    args = instantiate_args(["{}:{}", "x{}y"], BINARY)

    assert args == [f"{BINARY}:{BINARY}", f"x{BINARY}y"]


@pytest.mark.parametrize(
    "template",
    [
        [],
        ["-v"],
        ["{}", "{}", "{}"],
        ["-U", "flash:w:{}:e", "", "$HOME", "{{}}", "{ }"],
    ],
)
def test_length_and_non_placeholder_arguments_preserved(template):
    args = instantiate_args(template, BINARY)

    assert len(args) == len(template)
    for original, bound in zip(template, args, strict=True):
        if PLACEHOLDER not in original:
            assert bound == original


def test_no_environment_expansion():
    assert instantiate_args(["$HOME/{}"], "a.elf") == ["$HOME/a.elf"]


def test_accepts_string_path():
    assert instantiate_args(["{}"], "blink.elf") == ["blink.elf"]


def test_render_path_plain():
    assert render_path(BINARY) == str(BINARY)


@pytest.mark.skipif(os.name == "nt", reason="POSIX filenames are bytes")
def test_render_path_undecodable_bytes_is_lossy():
    path = Path(os.fsdecode(b"/tmp/bl\xffnk.elf"))

    rendered = render_path(path)

    assert rendered == "/tmp/bl\ufffdnk.elf"
    assert instantiate_args(["flash:w:{}"], path) == ["flash:w:/tmp/bl\ufffdnk.elf"]
