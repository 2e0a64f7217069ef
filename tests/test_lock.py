import os

import pytest

from kindling.kubeconfig.lock import lock_file, lock_name, locked, unlock_file


def _assert_held(target):
    assert os.listdir(os.path.dirname(target)) == [os.path.basename(lock_name(target))]
    with pytest.raises(FileExistsError):
        lock_file(target)


def _assert_released(target):
    assert os.listdir(os.path.dirname(target)) == []
    with pytest.raises(FileNotFoundError):
        unlock_file(target)


def test_lock_name():
    assert lock_name("foo") == "foo.lock"


@pytest.mark.parametrize("parts", [("config",), ("a", "b", "config")], ids=["flat", "nested"])
def test_lock_and_unlock(tmp_path, parts):
    target = str(tmp_path.joinpath(*parts))
    lock_file(target)
    _assert_held(target)
    unlock_file(target)
    _assert_released(target)


def test_unlock_without_lock_fails(tmp_path):
    with pytest.raises(FileNotFoundError):
        unlock_file(str(tmp_path / "config"))


def test_locked_context_releases(tmp_path):
    target = str(tmp_path / "config")
    with locked(target):
        _assert_held(target)
    _assert_released(target)


def test_locked_context_releases_on_error(tmp_path):
    target = str(tmp_path / "config")
    with pytest.raises(RuntimeError, match="boom"):
        with locked(target):
            raise RuntimeError("boom")
    _assert_released(target)