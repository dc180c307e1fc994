"""Render typst markup to SVG with the ``typst`` command-line compiler."""

from __future__ import annotations

import re
import subprocess

__all__ = ["compile_typst_code", "strip_background", "typst_svg"]

_COMMAND = ("typst", "compile", "-", "-", "-fsvg")

_PATH_ELEMENT = re.compile(r"<path[^>]*(?:>.*?</path>|/>)")

_PRELUDE = '#set page(margin: 0cm)\n#set text(fill: rgb("#ffffff"))\n'


def strip_background(svg: str) -> str:
    """Remove the first ``<path>`` element, which typst emits as the page background."""
    return _PATH_ELEMENT.sub("", svg, count=1)


def compile_typst_code(typst_code: str) -> str:
    """Compile typst source to SVG text with the page background removed."""
    try:
        result = subprocess.run(
            list(_COMMAND),
            input=typst_code.encode("utf-8"),
            stdout=subprocess.PIPE,
            check=False,
        )
    except OSError as exc:
        raise RuntimeError("failed to spawn typst") from exc
    output = result.stdout.decode("utf-8", errors="replace")
    return strip_background(output)


def typst_svg(typst_code: str) -> str:
    """Compile typst markup on a borderless page with white text."""
    return compile_typst_code(_PRELUDE + typst_code)