from __future__ import annotations

import os
from pathlib import Path

from atime_audit.auditconfig import AuditConfig
from atime_audit.auditor import Auditor

CONFIG_PATH = os.path.join(os.path.dirname(__file__), "test_config.ini")


def test_integration_against_temporary_tree(tmp_path: Path) -> None:
    (tmp_path / "top.txt").write_text("top")
    (tmp_path / "nested" / "deeper").mkdir(parents=True)
    (tmp_path / "nested" / "deeper" / "leaf.txt").write_text("leaf")
    (tmp_path / "nested" / ".hidden").write_text("hidden")
    output_file = tmp_path / "output.txt"

    config = AuditConfig(CONFIG_PATH)
    config.override(root_directory=str(tmp_path / "nested"))
    config._config.set("emit", "output_file", str(output_file))
    config._config.set("emit", "stdout", "false")
    auditor = Auditor(config)

    auditor.run_once()

    lines = output_file.read_text(encoding="utf-8").splitlines()
    assert {line.split(" - ")[0] for line in lines} == {
        str(tmp_path / "nested" / "deeper" / "leaf.txt"),
        str(tmp_path / "nested" / ".hidden"),
    }
    assert all(line.endswith("Z") for line in lines)
    assert not auditor._emitter._records
