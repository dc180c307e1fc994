import subprocess
from unittest.mock import patch

import pytest

from ranim.typst import compile_typst_code, strip_background, typst_svg

BACKGROUND = '<path d="M 0 0 L 10 0 L 10 10 Z" fill="#fff"></path>'
GLYPH = '<path d="M 1 1 L 2 2"/>'


def completed(stdout: bytes) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=[], returncode=0, stdout=stdout)


def test_strip_background_removes_only_first_path():
    svg = f"<svg>{BACKGROUND}<g>{GLYPH}</g></svg>"
    result = strip_background(svg)
    assert result == f"<svg><g>{GLYPH}</g></svg>"


def test_strip_background_handles_self_closing_path():
    svg = f"<svg>{GLYPH}<rect/></svg>"
    assert strip_background(svg) == "<svg><rect/></svg>"


def test_strip_background_without_path_is_unchanged():
    svg = "<svg><rect/></svg>"
    assert strip_background(svg) == svg


def test_compile_typst_code_runs_typst_and_strips():
    svg = f"<svg>{BACKGROUND}{GLYPH}</svg>".encode()
    with patch("ranim.typst.subprocess.run", return_value=completed(svg)) as run:
        result = compile_typst_code("#text(20pt)[hello]")
    args, kwargs = run.call_args
    assert args[0] == ["typst", "compile", "-", "-", "-fsvg"]
    assert kwargs["input"] == "#text(20pt)[hello]".encode()
    assert result == f"<svg>{GLYPH}</svg>"


def test_compile_typst_code_decodes_invalid_utf8_lossily():
    with patch("ranim.typst.subprocess.run", return_value=completed(b"<svg>\xff</svg>")):
        result = compile_typst_code("x")
    assert result == "<svg>\ufffd</svg>"


def test_compile_typst_code_missing_binary():
    with patch("ranim.typst.subprocess.run", side_effect=FileNotFoundError("typst")):
        with pytest.raises(RuntimeError, match="failed to spawn typst"):
            compile_typst_code("#text[R]")


def test_typst_svg_prepends_page_setup():
    code = "#text(20pt)[你好]"
    with patch("ranim.typst.subprocess.run", return_value=completed(b"<svg/>")) as run:
        result = typst_svg(code)
    sent = run.call_args.kwargs["input"].decode("utf-8")
    assert sent.endswith(code)
    assert "#set page(margin: 0cm)" in sent
    assert '#set text(fill: rgb("#ffffff"))' in sent
    assert result == "<svg/>"