from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from devassets import cli
from tests.workspace_helpers import make_project, make_workspace_information


def _invoke(runner: CliRunner, args: list[str]):
    return runner.invoke(cli.app, args)


def _write_workspace_info(root: Path, **flags) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    info_path = root / "workspace.json"
    info_path.write_text(
        json.dumps(make_workspace_information(make_project(str(root / "testApp.csproj"), **flags))),
        encoding="utf-8",
    )
    return info_path


def test_cli_help_lists_commands() -> None:
    result = _invoke(CliRunner(), ["--help"])
    assert result.exit_code == 0
    assert "assets" in result.output
    assert "lsp" in result.output


def test_assets_writes_documents(tmp_path: Path) -> None:
    info_path = _write_workspace_info(tmp_path, is_web=True)

    result = _invoke(
        CliRunner(),
        ["assets", "--workspace-info", str(info_path), "--root", str(tmp_path)],
    )

    assert result.exit_code == 0, result.output
    tasks = json.loads((tmp_path / ".vscode" / "tasks.json").read_text(encoding="utf-8"))
    launch = json.loads((tmp_path / ".vscode" / "launch.json").read_text(encoding="utf-8"))
    assert tasks["tasks"][0]["args"][1] == "${workspaceFolder}/testApp.csproj"
    assert launch["configurations"][0]["name"] == ".NET Core Launch (web)"
    assert "Wrote" in result.output


def test_assets_respects_existing_documents(tmp_path: Path) -> None:
    info_path = _write_workspace_info(tmp_path)
    out_dir = tmp_path / "out"
    out_dir.mkdir()
    (out_dir / "tasks.json").write_text("{}\n", encoding="utf-8")
    args = [
        "assets",
        "--workspace-info",
        str(info_path),
        "--root",
        str(tmp_path),
        "--out-dir",
        str(out_dir),
    ]

    first = _invoke(CliRunner(), args)
    assert first.exit_code == 0, first.output
    assert "Skipped" in first.output
    assert (out_dir / "tasks.json").read_text(encoding="utf-8") == "{}\n"
    assert (out_dir / "launch.json").exists()

    forced = _invoke(CliRunner(), [*args, "--force"])
    assert forced.exit_code == 0, forced.output
    assert json.loads((out_dir / "tasks.json").read_text(encoding="utf-8"))["version"] == "2.0.0"


def test_assets_explicit_launch_type(tmp_path: Path) -> None:
    info_path = _write_workspace_info(tmp_path, is_web=True)

    result = _invoke(
        CliRunner(),
        [
            "assets",
            "--workspace-info",
            str(info_path),
            "--root",
            str(tmp_path),
            "--launch-type",
            "Console",
        ],
    )

    assert result.exit_code == 0, result.output
    launch = json.loads((tmp_path / ".vscode" / "launch.json").read_text(encoding="utf-8"))
    assert launch["configurations"][0]["name"] == ".NET Core Launch (console)"


def test_assets_configuration_option_overrides_config(tmp_path: Path) -> None:
    info_path = _write_workspace_info(tmp_path, short_name="net80")
    (tmp_path / "devassets.toml").write_text(
        '[assets]\nconfiguration = "Release"\n', encoding="utf-8"
    )
    base = ["assets", "--workspace-info", str(info_path), "--root", str(tmp_path), "--force"]

    from_config = _invoke(CliRunner(), base)
    assert from_config.exit_code == 0, from_config.output
    launch = json.loads((tmp_path / ".vscode" / "launch.json").read_text(encoding="utf-8"))
    assert launch["configurations"][0]["program"] == (
        "${workspaceFolder}/bin/Release/net8.0/testApp.dll"
    )

    overridden = _invoke(CliRunner(), [*base, "--configuration", "Debug"])
    assert overridden.exit_code == 0, overridden.output
    launch = json.loads((tmp_path / ".vscode" / "launch.json").read_text(encoding="utf-8"))
    assert launch["configurations"][0]["program"] == (
        "${workspaceFolder}/bin/Debug/net8.0/testApp.dll"
    )


def test_assets_rejects_unknown_launch_type(tmp_path: Path) -> None:
    info_path = _write_workspace_info(tmp_path)

    result = _invoke(
        CliRunner(),
        ["assets", "--workspace-info", str(info_path), "--launch-type", "desktop"],
    )

    assert result.exit_code != 0


def test_assets_out_of_range_startup_project(tmp_path: Path) -> None:
    info_path = _write_workspace_info(tmp_path)

    result = _invoke(
        CliRunner(),
        [
            "assets",
            "--workspace-info",
            str(info_path),
            "--root",
            str(tmp_path),
            "--startup",
            "4",
        ],
    )

    assert result.exit_code == 2
    assert not (tmp_path / ".vscode").exists()


def test_assets_missing_workspace_info(tmp_path: Path) -> None:
    result = _invoke(
        CliRunner(),
        ["assets", "--workspace-info", str(tmp_path / "missing.json"), "--root", str(tmp_path)],
    )

    assert result.exit_code != 0
    assert not (tmp_path / ".vscode").exists()


def test_lsp_command_starts_server(monkeypatch, tmp_path: Path) -> None:
    from devassets import server

    calls: list[str] = []
    previous = server.session
    monkeypatch.setattr(server, "start", lambda start_fn=None: calls.append("start"))
    monkeypatch.chdir(tmp_path)
    try:
        result = _invoke(CliRunner(), ["lsp"])
    finally:
        server.session = previous

    assert result.exit_code == 0, result.output
    assert calls == ["start"]
