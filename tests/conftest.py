"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import os
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from structlog.testing import capture_logs

# Insert local src directory at the beginning of sys.path
# This ensures that the local flowspec package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of flowspec modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("flowspec"):
        del sys.modules[module_name]


@pytest.fixture
def log_events() -> Iterator[list[dict[str, Any]]]:
    """Capture structlog events emitted during the test."""
    with capture_logs() as captured:
        yield captured


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """No global config, no FLOWSPEC__ env vars, cwd in tmp_path."""
    import flowspec.config.loader as loader

    monkeypatch.setattr(loader, "GLOBAL_CONFIG_PATH", tmp_path / "global" / "config.yaml")
    for key in list(os.environ):
        if key.startswith("FLOWSPEC__"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    return tmp_path
