import json
import subprocess
from pathlib import Path
from unittest import mock

from rustdrill.project import Crate, RustAnalyzerProject


def test_add_path_rs_file():
    project = RustAnalyzerProject()
    project.add_path("exercises/intro/intro1.rs")
    assert len(project.crates) == 1
    crate = project.crates[0]
    assert crate.root_module == "exercises/intro/intro1.rs"
    assert crate.edition == "2021"
    assert crate.cfg == ["test"]
    assert crate.deps == []


def test_add_path_ignores_other_files():
    project = RustAnalyzerProject()
    project.add_path("exercises/README.md")
    project.add_path("exercises/clippy")
    assert project.crates == []


def test_add_path_uses_text_after_first_dot():
    project = RustAnalyzerProject()
    project.add_path("./exercises/intro/intro1.rs")
    assert project.crates == []


def test_exercises_to_json(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "exercises" / "intro").mkdir(parents=True)
    (tmp_path / "exercises" / "clippy").mkdir()
    (tmp_path / "exercises" / "intro" / "intro1.rs").write_text("fn main() {}\n")
    (tmp_path / "exercises" / "clippy" / "Cargo.toml").write_text("")
    (tmp_path / "exercises" / "README.md").write_text("")
    project = RustAnalyzerProject()
    project.exercises_to_json()
    assert [c.root_module for c in project.crates] == [
        str(Path("exercises", "intro", "intro1.rs"))
    ]


def test_write_to_disk_round_trip(tmp_path):
    project = RustAnalyzerProject(sysroot_src=str(tmp_path))
    project.add_path("exercises/intro/intro1.rs")
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    text = target.read_text(encoding="utf-8")
    assert json.loads(text) == project.to_dict()
    assert ", " not in text


def test_to_dict_shape():
    crate = Crate(root_module="exercises/if/if1.rs")
    project = RustAnalyzerProject(crates=[crate])
    data = project.to_dict()
    assert set(data) == {"sysroot_src", "crates"}
    assert data["crates"] == [crate.to_dict()]
    assert set(crate.to_dict()) == {"root_module", "edition", "deps", "cfg"}


def test_sysroot_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("RUST_SRC_PATH", str(tmp_path))
    project = RustAnalyzerProject()
    project.get_sysroot_src()
    assert project.sysroot_src == str(tmp_path)


def test_sysroot_from_rustc(tmp_path, monkeypatch, capsys):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    toolchain = str(tmp_path / "toolchain")
    result = subprocess.CompletedProcess(
        args=[], returncode=0, stdout=(toolchain + "\n").encode(), stderr=b""
    )
    with mock.patch("subprocess.run", return_value=result) as run:
        project = RustAnalyzerProject()
        project.get_sysroot_src()
    assert run.call_args.args[0] == ["rustc", "--print", "sysroot"]
    assert project.sysroot_src == str(
        Path(toolchain, "lib", "rustlib", "src", "rust", "library")
    )
    assert f"Determined toolchain: {toolchain}" in capsys.readouterr().out