"""Pytest fixtures for pcb-sexpr tests."""

from pathlib import Path

import pytest

# Small symbol library in hand-written (unformatted) layout
SYMBOL_LIB = """(kicad_symbol_lib
  (version 20231120)
  (generator "pcb")
  (symbol "Device:R"
    (pin_numbers hide)
    (property "Reference" "R" (at 2.032 0 90) (effects (font (size 1.27 1.27))))
    (property "Value" "10k" (at 0 0 90))
    (pin passive line (at 0 3.81 270) (length 1.27) (name "~") (number "1"))
  )
)
"""


@pytest.fixture
def symbol_lib_text() -> str:
    """Return the sample symbol library text."""
    return SYMBOL_LIB


@pytest.fixture
def symbol_lib_file(tmp_path: Path) -> Path:
    """Write the sample symbol library to a file."""
    path = tmp_path / "sample.kicad_sym"
    path.write_text(SYMBOL_LIB, encoding="utf-8")
    return path


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty project directory with no user or project config.

    Returns the project directory; tests can write .pcb-sexpr.toml into it.
    """
    monkeypatch.setattr("pcb_sexpr.config.USER_CONFIG_PATH", tmp_path / "user" / "config.toml")
    project = tmp_path / "project"
    project.mkdir()
    (project / ".git").mkdir()
    monkeypatch.chdir(project)
    return project
