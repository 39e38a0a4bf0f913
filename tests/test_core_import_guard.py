import importlib.util
from pathlib import Path

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "check_core_imports.py"


def _load_guard():
    spec = importlib.util.spec_from_file_location("check_core_imports", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    assert spec.loader is not None  # for mypy
    spec.loader.exec_module(module)
    return module


def test_core_import_guard_passes():
    exit_code = _load_guard().main()
    assert exit_code == 0, "core import guard failed"


def test_core_import_guard_flags_relative_client_import(tmp_path, monkeypatch):
    guard = _load_guard()
    core = tmp_path / "monday_client" / "core"
    core.mkdir(parents=True)
    bad = core / "bad.py"
    bad.write_text(
        "from typing import TYPE_CHECKING\n"
        "if TYPE_CHECKING:\n"
        "    from ..client import MondayClient\n"
        "from ..resources import board\n"
    )
    monkeypatch.setattr(guard, "SRC_DIR", tmp_path)

    errors = guard.scan_file(bad)
    assert errors == [f"{bad}: forbidden import 'monday_client.resources'"]
