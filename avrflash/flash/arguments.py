"""Substitution of the binary path into the programmer argument template."""

import os
from pathlib import Path


PLACEHOLDER = "{}"


def render_path(path: Path | str) -> str:
    """Render ``path`` as text, replacing anything that is not valid UTF-8."""
    return os.fsencode(path).decode("utf-8", errors="replace")


def instantiate_args(template: list[str], path: Path | str) -> list[str]:
    """Replace every ``{}`` in every template argument with ``path``.

    There is no escaping and no other interpolation; the result has the same
    length and order as ``template``.
    """
    rendered = render_path(path)
    return [argument.replace(PLACEHOLDER, rendered) for argument in template]
