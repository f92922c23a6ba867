from pathlib import Path

import pytest
from click.testing import CliRunner

from rename_from_sheet.cli import main


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "work"
    path.mkdir()
    for name in ["invite 1.pdf", "invite 2.pdf", "invite 3.pdf"]:
        (path / name).write_text("")
    monkeypatch.chdir(path)
    return path


def test_cli_renames_files(workdir: Path, names_workbook: Path) -> None:
    """Test that the command renames files and prints one line per rename."""
    runner = CliRunner()
    result = runner.invoke(main, [str(names_workbook), "-f", "invite", "-p", "Invitation_?.pdf", "-c", "name"])

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "File renamed invite 1.pdf -> Invitation_ABC.pdf",
        "File renamed invite 2.pdf -> Invitation_DEF.pdf",
        "File renamed invite 3.pdf -> Invitation_GHI.pdf",
    ]
    assert sorted(p.name for p in workdir.iterdir()) == [
        "Invitation_ABC.pdf",
        "Invitation_DEF.pdf",
        "Invitation_GHI.pdf",
    ]


def test_cli_long_options(workdir: Path, names_workbook: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        main,
        [
            str(names_workbook),
            "--files",
            r"3\.pdf$",
            "--dir",
            ".",
            "--pattern",
            "? done.pdf",
            "--sheet",
            "Sheet1",
            "--column",
            "id",
        ],
    )

    assert result.exit_code == 0, result.output
    assert result.output == "File renamed invite 3.pdf -> 1 done.pdf\n"


def test_cli_dry_run(workdir: Path, names_workbook: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(main, [str(names_workbook), "-n", "-c", "name"])

    assert result.exit_code == 0, result.output
    assert "Would rename invite 1.pdf -> ABC" in result.output
    assert sorted(p.name for p in workdir.iterdir()) == ["invite 1.pdf", "invite 2.pdf", "invite 3.pdf"]


def test_cli_invalid_regex(workdir: Path, names_workbook: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(main, [str(names_workbook), "-f", "(invite"])

    assert result.exit_code == 2
    assert "Invalid file pattern" in result.output


def test_cli_missing_sheet(workdir: Path, names_workbook: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(main, [str(names_workbook), "-s", "Nope"])

    assert result.exit_code == 1
    assert "Error: Sheet 'Nope' not found" in result.output
    assert sorted(p.name for p in workdir.iterdir()) == ["invite 1.pdf", "invite 2.pdf", "invite 3.pdf"]


def test_cli_empty_sheet(workdir: Path, make_workbook) -> None:
    runner = CliRunner()
    result = runner.invoke(main, [str(make_workbook([]))])

    assert result.exit_code == 1
    assert "Workbook is empty" in result.output


def test_cli_missing_directory(workdir: Path, names_workbook: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(main, [str(names_workbook), "-d", "missing"])

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_cli_rename_failure(workdir: Path, names_workbook: Path) -> None:
    """Files listed from --dir must also exist in the working directory."""
    other = workdir.parent / "other"
    other.mkdir()
    (other / "elsewhere.txt").write_text("")

    runner = CliRunner()
    result = runner.invoke(main, [str(names_workbook), "-d", str(other), "-c", "name"])

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "elsewhere.txt" in result.output


def test_cli_requires_workbook() -> None:
    runner = CliRunner()
    result = runner.invoke(main, [])

    assert result.exit_code == 2
    assert "WORKBOOK" in result.output
