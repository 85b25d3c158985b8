"""CLI behaviour tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from scaffolder.cli import RESOURCES_DIR_ENV, _build_parser, main


@pytest.fixture
def description_file(tmp_path: Path) -> Path:
    path = tmp_path / "project.md"
    path.write_text("---\nname: order\npackage_name: com.acme.order\n---\n", encoding="utf-8")
    return path


def test_cli_accepts_verbose_before_and_after_command() -> None:
    parser = _build_parser()
    assert parser.parse_args(["--verbose", "boot-versions"]).verbose is True
    assert parser.parse_args(["boot-versions", "-v"]).verbose is True


def test_generate_defaults() -> None:
    args = _build_parser().parse_args(["generate", "project.md"])
    assert args.command == "generate"
    assert args.overwrite is False
    assert args.fail_fast is False
    assert args.workdir is None


def test_generate_writes_project(tmp_path: Path, description_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    workdir = tmp_path / "out"

    code = main(["generate", str(description_file), "--workdir", str(workdir)])

    assert code == 0
    assert (workdir / "src/main/java/com/acme/order/OrderApplication.java").is_file()
    assert (workdir / "src/main/java/com/acme/order/comm/RespCode.java").is_file()
    assert "Project generated at" in capsys.readouterr().out


def test_generate_overrides(tmp_path: Path, description_file: Path) -> None:
    workdir = tmp_path / "out"

    code = main(
        [
            "generate",
            str(description_file),
            "--workdir",
            str(workdir),
            "--package-name",
            "org.other",
            "--language",
            "kotlin",
            "--application-name",
            "Main",
        ]
    )

    assert code == 0
    assert (workdir / "src/main/kotlin/org/other/Main.kt").is_file()


def test_generate_refuses_non_empty_workdir(tmp_path: Path, description_file: Path) -> None:
    workdir = tmp_path / "out"
    workdir.mkdir()
    (workdir / "existing.txt").write_text("x", encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        main(["generate", str(description_file), "--workdir", str(workdir)])
    assert exc.value.code == 2


def test_generate_overwrite_appends_again(tmp_path: Path, description_file: Path) -> None:
    workdir = tmp_path / "out"
    main(["generate", str(description_file), "--workdir", str(workdir)])
    logback = workdir / "src/main/resources/Logback.xml"
    first = logback.read_text(encoding="utf-8")

    code = main(["generate", str(description_file), "--workdir", str(workdir), "--overwrite"])

    assert code == 0
    assert logback.read_text(encoding="utf-8") == first + first


def test_generate_unknown_boot_version(tmp_path: Path, description_file: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["generate", str(description_file), "--workdir", str(tmp_path / "out"), "--boot-version", "9.9.9"])
    assert exc.value.code == 2


def test_generate_with_resources_dir_from_env(
    tmp_path: Path,
    description_file: Path,
    resources_dir: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setenv(RESOURCES_DIR_ENV, str(resources_dir))

    code = main(["generate", str(description_file), "--workdir", str(tmp_path / "out")])

    assert code == 1
    assert capsys.readouterr().out.count("FAILED ") == 3


def test_boot_versions(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["boot-versions"]) == 0
    out = capsys.readouterr().out
    assert "2.3.2.RELEASE\t2.3.2 (default)\n" in out
    assert "2.4.0-M1\t2.4.0 (M1)\n" in out


def test_cli_accepts_log_file_before_command() -> None:
    args = _build_parser().parse_args(["--log-file", "run.log", "boot-versions"])
    assert args.log_file == "run.log"


def test_generate_writes_log_file(tmp_path: Path, description_file: Path) -> None:
    log_file = tmp_path / "run.log"

    code = main(["--log-file", str(log_file), "generate", str(description_file), "--workdir", str(tmp_path / "out")])

    assert code == 0
    text = log_file.read_text(encoding="utf-8")
    assert "INFO scaffolder.generator: Generating order" in text


def test_boot_versions_missing_metadata_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["boot-versions", "--metadata", str(tmp_path / "nope.json")])
    assert exc.value.code == 2
    assert "Cannot read metadata file" in capsys.readouterr().err


def test_boot_versions_release_entry_not_an_object(tmp_path: Path) -> None:
    metadata = tmp_path / "meta.json"
    metadata.write_text('{"projectReleases": ["2.3.2.RELEASE"]}', encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        main(["boot-versions", "--metadata", str(metadata)])
    assert exc.value.code == 2


def test_generate_workdir_is_a_file(tmp_path: Path, description_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    target = tmp_path / "f"
    target.write_text("x", encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        main(["generate", str(description_file), "--workdir", str(target)])
    assert exc.value.code == 2
    assert "not a directory" in capsys.readouterr().err


def test_generate_directory_creation_failure_exits_cleanly(
    tmp_path: Path, description_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    workdir = tmp_path / "out"
    (workdir / "src" / "main").mkdir(parents=True)
    # a plain file where the resources folder must go blocks the mappers directory
    (workdir / "src" / "main" / "resources").write_text("x", encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        main(["generate", str(description_file), "--workdir", str(workdir), "--overwrite"])
    assert exc.value.code == 2
    assert "boot-scaffolder: error:" in capsys.readouterr().err
