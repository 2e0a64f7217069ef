import os

from kindling.kubeconfig.paths import home_dir, path_for_merge, paths


def _env(mapping):
    return lambda key: mapping.get(key, "")


def test_paths_explicit():
    env = _env(
        {
            "KUBECONFIG": os.pathsep.join(["/foo", "/bar", "", "/foo", "/bar"]),
            "HOME": "/home",
        }
    )
    assert paths("foo", env) == ["foo"]


def test_paths_kubeconfig_list():
    env = _env(
        {
            "KUBECONFIG": os.pathsep.join(["/foo", "/bar", "", "/foo", "/bar"]),
            "HOME": "/home",
        }
    )
    assert paths("", env) == ["/foo", "/bar"]


def test_paths_home_default():
    assert paths("", _env({"HOME": "/home"})) == ["/home/.kube/config"]


def test_path_for_merge_explicit():
    env = _env(
        {
            "KUBECONFIG": os.pathsep.join(["/foo", "/bar", "", "/foo", "/bar"]),
            "HOME": "/home",
        }
    )
    assert path_for_merge("foo", env) == "foo"


def test_path_for_merge_first_existing(tmp_path):
    (tmp_path / "fake-home").mkdir()
    fakes = []
    for name in ("foo", "bar", "baz"):
        p = tmp_path / name
        p.touch()
        fakes.append(str(p))
    env = _env({"KUBECONFIG": os.pathsep.join(fakes)})
    assert path_for_merge("", env) == fakes[0]


def test_path_for_merge_skips_missing(tmp_path):
    existing = tmp_path / "exists"
    existing.touch()
    env = _env({"KUBECONFIG": os.pathsep.join([str(tmp_path / "missing"), str(existing)])})
    assert path_for_merge("", env) == str(existing)


def test_path_for_merge_last_if_none_exist():
    env = _env({"KUBECONFIG": os.pathsep.join(["/bogus/path", "/bogus/path/two"])})
    assert path_for_merge("", env) == "/bogus/path/two"


def test_home_dir_windows_with_kube_config(tmp_path):
    fake_home = tmp_path / "fake-home"
    kube = fake_home / ".kube"
    kube.mkdir(parents=True)
    (kube / "config").touch()
    result = home_dir(
        "windows",
        _env(
            {
                "HOME": str(fake_home),
                "HOMEDRIVE": "ZZ:",
                "HOMEPATH": "ZZ:\\Users\\fake-user-zzz",
            }
        ),
    )
    assert result == str(fake_home)


def test_home_dir_windows_without_kube_config(tmp_path):
    result = home_dir(
        "windows",
        _env(
            {
                "HOME": str(tmp_path),
                "HOMEDRIVE": "",
                "HOMEPATH": "Users/fake-user-zzz",
            }
        ),
    )
    assert result == str(tmp_path)


def test_home_dir_windows_none_exist():
    result = home_dir(
        "windows",
        _env(
            {
                "HOME": "Z:/faaaaake",
                "HOMEDRIVE": "Z:/",
                "HOMEPATH": "Users/fake-user-zzz",
            }
        ),
    )
    assert result == "Z:/faaaaake"


def test_home_dir_windows_no_path():
    assert home_dir("windows", lambda key: "") == ""


def test_home_dir_non_windows_uses_home():
    assert home_dir("linux", _env({"HOME": "/home/someone", "USERPROFILE": "/x"})) == "/home/someone"