"""Core test fixtures for the zmkview project."""

import logging
import os
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
import structlog
from typer.testing import CliRunner


BASE_BINDINGS = [
    # Row 0
    "&kp TAB", "&kp Q", "&kp W", "&kp E", "&kp R", "&kp T",
    "&kp Y", "&kp U", "&kp I", "&kp O", "&kp P", "&kp BSPC",
    # Row 1
    "&kp LCTRL", "&kp A", "&kp S", "&kp D", "&kp F", "&kp G",
    "&kp H", "&kp J", "&kp K", "&kp L", "&kp SEMI", "&kp SQT",
    # Row 2
    "&kp LSHIFT", "&kp Z", "&kp X", "&kp C", "&kp V", "&kp B",
    "&kp N", "&kp M", "&kp COMMA", "&kp DOT", "&kp FSLH", "&kp ESC",
    # Thumbs
    "&kp LGUI", "&mo 1", "&kp SPACE", "&kp RET", "&mo 2", "&kp RALT",
]  # fmt: skip

LOWER_BINDINGS = (
    ["&trans", "&none", "&mt LSHIFT A", "&lt 2 SPACE", "&tog 1", "&sk LSHIFT"]
    + ["&combo_esc", "&bt BT_SEL 0"]
    + ["&trans"] * 28
    + ["&kp A", "&kp B", "&kp C", "&kp D", "&kp E", "&kp F"]
)


def render_keymap(layers: list[tuple[str, list[str]]]) -> str:
    """Render a ZMK keymap file containing the given layers."""
    layer_blocks = []
    for name, bindings in layers:
        rows = "\n".join(
            "                " + "  ".join(bindings[i : i + 12])
            for i in range(0, len(bindings), 12)
        )
        layer_blocks.append(
            f"""
        {name}_layer {{
            display-name = "{name}";
            // {name} layer
            bindings = <
{rows}
            >;
        }};"""
        )

    body = "".join(layer_blocks)
    return f"""/*
 * Copyright (c) 2024 The ZMK Contributors
 * SPDX-License-Identifier: MIT
 */

#include <behaviors.dtsi>
#include <dt-bindings/zmk/keys.h>
#include <dt-bindings/zmk/bt.h>

/ {{
    keymap {{
        compatible = "zmk,keymap";
{body}
    }};
}};
"""


@pytest.fixture
def base_bindings() -> list[str]:
    """42 bindings of a typical base layer."""
    return list(BASE_BINDINGS)


@pytest.fixture
def lower_bindings() -> list[str]:
    """42 bindings exercising every binding syntax."""
    return list(LOWER_BINDINGS)


@pytest.fixture
def make_keymap() -> Callable[[list[tuple[str, list[str]]]], str]:
    """Return a builder rendering (name, bindings) pairs as keymap text."""
    return render_keymap


@pytest.fixture
def sample_keymap_content(base_bindings, lower_bindings) -> str:
    """Valid two-layer keymap file content."""
    return render_keymap([("base", base_bindings), ("lower", lower_bindings)])


@pytest.fixture
def sample_keymap_file(tmp_path: Path, sample_keymap_content: str) -> Path:
    """Valid keymap written to a temporary file."""
    keymap_file = tmp_path / "corne.keymap"
    keymap_file.write_text(sample_keymap_content, encoding="utf-8")
    return keymap_file


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def isolated_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """Isolate configuration lookup from the real user environment.

    Changes into an empty working directory, points XDG_CONFIG_HOME at a
    temporary directory and removes ZMKVIEW_* environment variables.

    Yields:
        The temporary XDG config home
    """
    config_home = tmp_path / "xdg"
    config_home.mkdir()
    workdir = tmp_path / "work"
    workdir.mkdir()

    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.chdir(workdir)
    for name in list(os.environ):
        if name.startswith("ZMKVIEW_"):
            monkeypatch.delenv(name)

    yield config_home


@pytest.fixture
def reset_logging() -> Generator[None, None, None]:
    """Remove the handlers setup_logging installs on the root logger."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            handler.close()
            root.removeHandler(handler)
    root.setLevel(level)
