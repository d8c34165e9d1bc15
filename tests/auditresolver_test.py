from __future__ import annotations

import os
import time
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from atime_audit.auditerrors import AccessTimeUnsupportedError
from atime_audit.auditerrors import AuditError
from atime_audit.auditerrors import InvalidTimestampError
from atime_audit.auditresolver import AccessTimeResolver
from atime_audit.auditresolver import get_access_time


@pytest.fixture
def resolver() -> AccessTimeResolver:
    return AccessTimeResolver()


def test_resolve_returns_whole_epoch_seconds(
    tmp_path: Path,
    resolver: AccessTimeResolver,
) -> None:
    target = tmp_path / "file.txt"
    target.write_text("hello")
    os.utime(target, ns=(1_234_567_890_987_654_321, 1_000_000_000_000_000_000))

    assert resolver.resolve(str(target)) == 1_234_567_890


def test_resolve_fresh_file_is_non_negative(
    tmp_path: Path,
    resolver: AccessTimeResolver,
) -> None:
    target = tmp_path / "file.txt"
    target.write_text("hello")
    target.read_text()

    first = resolver.resolve(str(target))
    second = resolver.resolve(str(target))

    assert isinstance(first, int)
    assert 0 <= first <= second
    assert first <= int(time.time()) + 1


def test_resolve_missing_file_raises(
    tmp_path: Path,
    resolver: AccessTimeResolver,
) -> None:
    with pytest.raises(FileNotFoundError):
        resolver.resolve(str(tmp_path / "missing.txt"))


def test_resolve_unsupported_access_time(resolver: AccessTimeResolver) -> None:
    with patch("atime_audit.auditresolver.os.stat", return_value=SimpleNamespace()):
        with pytest.raises(
            AccessTimeUnsupportedError, match="Could not get access time"
        ):
            resolver.resolve("/foo/bar.txt")


def test_unsupported_access_time_is_not_an_os_error(
    resolver: AccessTimeResolver,
) -> None:
    with patch("atime_audit.auditresolver.os.stat", return_value=SimpleNamespace()):
        with pytest.raises(AuditError) as error:
            resolver.resolve("/foo/bar.txt")

    assert not isinstance(error.value, OSError)
    assert error.value.path == "/foo/bar.txt"


def test_resolve_pre_epoch_access_time_raises(resolver: AccessTimeResolver) -> None:
    stat_result = SimpleNamespace(st_atime_ns=-1_500_000_000)

    with patch("atime_audit.auditresolver.os.stat", return_value=stat_result):
        with pytest.raises(InvalidTimestampError) as error:
            resolver.resolve("/foo/bar.txt")

    assert isinstance(error.value, ValueError)
    assert error.value.atime_ns == -1_500_000_000


def test_resolve_epoch_is_zero(resolver: AccessTimeResolver) -> None:
    stat_result = SimpleNamespace(st_atime_ns=999_999_999)

    with patch("atime_audit.auditresolver.os.stat", return_value=stat_result):
        assert resolver.resolve("/foo/bar.txt") == 0


def test_get_access_time_unusual_name(tmp_path: Path) -> None:
    target = tmp_path / ".naïve résumé, (1).txt"
    target.write_text("x")
    os.utime(target, (86_400, 86_400))

    assert get_access_time(str(target)) == 86_400
