"""Tests for the Gradio app callbacks."""
# ruff: noqa: S101
# pylint: disable=import-error

from __future__ import annotations

import pytest

gr = pytest.importorskip("gradio")

import app  # noqa: E402  # pylint: disable=wrong-import-position


def test_run_transform() -> None:
    """The selected transformer is applied to the input."""
    assert app.run_transform("base64encode", "Hello, World!") == "SGVsbG8sIFdvcmxkIQ=="
    assert app.run_transform("base64encode", None) == ""


def test_run_transform_shows_errors() -> None:
    """Invalid input is reported in place of the output."""
    assert app.run_transform("base64decode", "Invalid Base64!") == "Invalid Base64 input"
    assert app.run_transform("nope", "x") == "Unknown transformer: nope"


def test_swap_to_inverse() -> None:
    """Swap selects the inverse and moves the output into the input."""
    new_id, new_input, new_output, status = app.swap("base64encode", "Hello, World!", "SGVsbG8sIFdvcmxkIQ==")
    assert new_id == "base64decode"
    assert new_input == "SGVsbG8sIFdvcmxkIQ=="
    assert new_output == "Hello, World!"
    assert status == "Switched to base64decode"


def test_swap_without_inverse() -> None:
    """Without an inverse the state is unchanged."""
    assert app.swap("md5hash", "abc", "900150983cd24fb0d6963f7d28e17f72") == (
        "md5hash",
        "abc",
        "900150983cd24fb0d6963f7d28e17f72",
        app.NO_INVERSE_MESSAGE,
    )


def test_describe() -> None:
    """The description mentions the inverse when there is one."""
    assert "Inverse: `urldecode`" in app.describe("urlencode")
    assert "Inverse" not in app.describe("md5hash")
    assert app.describe(None) == "Select a transformer"


def test_build_app() -> None:
    """The Blocks app can be built."""
    assert isinstance(app.build_app(), gr.Blocks)
