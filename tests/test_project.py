import json
import subprocess
from pathlib import Path
from unittest.mock import patch

from rustdrill.project import Crate, RustAnalyzerProject


def test_add_path_only_rust_files():
    project = RustAnalyzerProject()
    project.add_path("exercises/intro/intro1.rs")
    project.add_path("exercises/intro/README.md")
    assert project.crates == [Crate(root_module=str(Path("exercises/intro/intro1.rs")))]
    assert project.crates[0].edition == "2021"
    assert project.crates[0].cfg == ["test"]


def test_exercises_to_json(tmp_path):
    root = tmp_path / "exercises"
    (root / "intro").mkdir(parents=True)
    (root / "intro" / "intro1.rs").write_text("fn main() {}")
    (root / "intro" / "README.md").write_text("readme")
    (root / "quiz1.rs").write_text("fn main() {}")
    project = RustAnalyzerProject()
    project.exercises_to_json(root)
    roots = sorted(crate.root_module for crate in project.crates)
    assert roots == sorted([str(root / "intro" / "intro1.rs"), str(root / "quiz1.rs")])


def test_sysroot_from_environment(monkeypatch):
    monkeypatch.setenv("RUST_SRC_PATH", "/src/rust")
    project = RustAnalyzerProject()
    project.get_sysroot_src()
    assert project.sysroot_src == "/src/rust"


def test_sysroot_from_rustc(monkeypatch, capsys):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    result = subprocess.CompletedProcess(args=[], returncode=0, stdout=b"/opt/toolchain\n", stderr=b"")
    project = RustAnalyzerProject()
    with patch("rustdrill.project.subprocess.run", return_value=result) as run:
        project.get_sysroot_src()
    assert run.call_args.args[0] == ["rustc", "--print", "sysroot"]
    assert Path(project.sysroot_src).parts[-5:] == ("lib", "rustlib", "src", "rust", "library")
    assert Path(project.sysroot_src).parts[:-5] == Path("/opt/toolchain").parts
    assert "Determined toolchain: /opt/toolchain" in capsys.readouterr().out


def test_empty_project_json():
    assert RustAnalyzerProject().to_json() == '{"sysroot_src":"","crates":[]}'


def test_write_to_disk_round_trip(tmp_path):
    project = RustAnalyzerProject(sysroot_src="/src/rust")
    project.add_path("exercises/quiz1.rs")
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    data = json.loads(target.read_text())
    assert data["sysroot_src"] == "/src/rust"
    assert data["crates"][0]["root_module"] == str(Path("exercises/quiz1.rs"))
    assert list(data["crates"][0]) == ["root_module", "edition", "deps", "cfg"]
    assert data["crates"][0]["deps"] == []