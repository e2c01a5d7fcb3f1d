from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console

from buildassets.branches import target_branch
from buildassets.config import default_config
from buildassets.errors import BuildAssetsError
from buildassets.models import BuildAssets
from buildassets.runtime import configure_logging
from buildassets.summary import BuildResultsDirectoryInfo

app = typer.Typer(help="Summarize Microsoft Go build output as a build asset JSON file")

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)

SOURCE_DIR_OPTION = typer.Option(Path("."), "--source-dir", file_okay=False)
ARTIFACTS_DIR_OPTION = typer.Option("", "--artifacts-dir")
DESTINATION_URL_OPTION = typer.Option("", "--destination-url")
BRANCH_OPTION = typer.Option(..., "--branch")
BUILD_ID_OPTION = typer.Option("", "--build-id")
OUT_OPTION = typer.Option(None, "--out", "-o", dir_okay=False)
MANIFEST_ARGUMENT = typer.Argument(..., exists=True, dir_okay=False)


@app.command("summarize")
def summarize_cmd(
    source_dir: Path = SOURCE_DIR_OPTION,
    artifacts_dir: str = ARTIFACTS_DIR_OPTION,
    destination_url: str = DESTINATION_URL_OPTION,
    branch: str = BRANCH_OPTION,
    build_id: str = BUILD_ID_OPTION,
    out: Path | None = OUT_OPTION,
) -> None:
    configure_logging()
    logger.info(
        "summarize start source=%s artifacts=%s branch=%s", source_dir, artifacts_dir, branch
    )
    info = BuildResultsDirectoryInfo(
        source_dir=source_dir,
        artifacts_dir=artifacts_dir or None,
        destination_url=destination_url,
        branch=branch,
        build_id=build_id,
    )
    try:
        assets = info.create_summary(default_config())
    except BuildAssetsError as exc:
        console.print(f"Summary failed: {exc}")
        raise typer.Exit(code=1) from exc
    if out is None:
        typer.echo(assets.to_json(), nl=False)
        return
    assets.save(out)
    logger.info("summarize complete out=%s", out)
    console.print(f"Build assets: {out}")


@app.command("target-branch")
def target_branch_cmd(branch: str) -> None:
    target = target_branch(branch)
    if not target:
        err_console.print(f"No Go Docker update needed for branch {branch}")
    typer.echo(target)


@app.command("show")
def show_cmd(manifest: Path = MANIFEST_ARGUMENT) -> None:
    try:
        assets = BuildAssets.load(manifest)
    except BuildAssetsError as exc:
        console.print(f"Invalid build assets: {exc}")
        raise typer.Exit(code=1) from exc
    console.print(f"Version: {assets.version}")
    console.print(f"Branch: {assets.branch} (build {assets.build_id})")
    console.print(f"Docker target branch: {assets.docker_target_branch() or '-'}")
    for arch in assets.arches:
        console.print(f"{arch.env.GOOS}/{arch.env.GOARCH} {arch.url} {arch.sha256}")


if __name__ == "__main__":
    app()
