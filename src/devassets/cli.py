from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from devassets.assets import AssetGenerator, ProgramLaunchType, WorkspaceFolder
from devassets.config import (
    assets_defaults,
    build_configuration,
    merge_payload,
    preferred_framework,
)
from devassets.exceptions import DevAssetsError
from devassets.logging import configure_logging, get_logger
from devassets.runtime.json_io import load_json_object_path, write_json_document

app = typer.Typer(add_completion=False)
logger = get_logger("cli")

_DEFAULT_OUT_DIR_NAME = ".vscode"
_LAUNCH_TYPES = ", ".join(kind.value for kind in ProgramLaunchType)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v"),
    log_file: Optional[Path] = typer.Option(None, "--log-file"),
) -> None:
    """Generate editor build/debug assets and serve reconciled diagnostics."""
    configure_logging(verbose=verbose, log_file=log_file)


def _parse_launch_type(value: str | None) -> ProgramLaunchType | None:
    if value is None:
        return None
    try:
        return ProgramLaunchType(value.strip().lower())
    except ValueError:
        raise typer.BadParameter(f"launch type must be one of: {_LAUNCH_TYPES}")


def _build_generator(
    *,
    workspace_info: Path,
    root: Path,
    config: Path | None,
    framework: str | None,
    configuration: str | None,
) -> AssetGenerator:
    payload = load_json_object_path(workspace_info)
    if not payload:
        raise typer.BadParameter(
            f"{workspace_info} does not contain a workspace information object"
        )
    settings = merge_payload(
        {"preferred_framework": framework, "configuration": configuration},
        assets_defaults(root, config),
    )
    return AssetGenerator.from_workspace_information(
        payload,
        WorkspaceFolder.from_path(root),
        preferred_framework=preferred_framework(settings),
        configuration=build_configuration(settings),
    )


@app.command("assets")
def assets(
    workspace_info: Path = typer.Option(
        ..., "--workspace-info", help="JSON workspace information reported by the build service."
    ),
    root: Path = typer.Option(Path("."), "--root"),
    startup: int = typer.Option(0, "--startup", help="Index of the startup project."),
    launch_type: Optional[str] = typer.Option(
        None, "--launch-type", help=f"One of: {_LAUNCH_TYPES}. Inferred when omitted."
    ),
    framework: Optional[str] = typer.Option(None, "--framework"),
    configuration: Optional[str] = typer.Option(
        None, "--configuration", help="Build configuration used in output paths."
    ),
    config: Optional[Path] = typer.Option(None, "--config"),
    out_dir: Optional[Path] = typer.Option(None, "--out-dir"),
    force: bool = typer.Option(False, "--force", help="Overwrite existing documents."),
) -> None:
    """Write tasks.json and launch.json for the startup project."""
    requested_type = _parse_launch_type(launch_type)
    target_dir = out_dir if out_dir is not None else root / _DEFAULT_OUT_DIR_NAME
    try:
        generator = _build_generator(
            workspace_info=workspace_info,
            root=root,
            config=config,
            framework=framework,
            configuration=configuration,
        )
        generator.set_startup_project(startup)
        tasks_document = generator.create_tasks_configuration().to_json()
        launch_document = generator.create_launch_document(requested_type)
    except (DevAssetsError, ValidationError) as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=2)

    for name, document in (("tasks.json", tasks_document), ("launch.json", launch_document)):
        path = target_dir / name
        if write_json_document(path, document, force=force):
            typer.echo(f"Wrote {path}")
        else:
            typer.echo(f"Skipped {path} (exists; use --force to overwrite)")


@app.command("lsp")
def lsp() -> None:
    """Run the diagnostics language server over stdio."""
    from devassets import server

    server.reset_session(Path.cwd())
    logger.info("starting language server")
    server.start()
