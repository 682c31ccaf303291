from __future__ import annotations

import json
from pathlib import Path

import typer
from dotenv import load_dotenv

from .config import AppConfig
from .container import Container
from .cli_formatter import format_record, format_report
from ..core.domain.exceptions import (
    InvalidRepositoryUrlError,
    MalformedManifestError,
    ManifestNotFoundError,
)
from ..core.domain.manifest import load_manifest
from ..core.domain.models import AuditReport

load_dotenv()

app = typer.Typer(add_completion=False, no_args_is_help=True)


def _load_config(log_level: str | None) -> AppConfig:
    config = AppConfig()
    if log_level:
        config = config.model_copy(
            update={"logging": config.logging.model_copy(update={"level": log_level.upper()})}
        )
    return config


def _create_container(config: AppConfig) -> Container:
    container = Container()
    container.config.from_pydantic(config)
    container.init_resources()
    return container


def _echo_report(report: AuditReport, *, json_output: bool, limit: int | None) -> None:
    if json_output:
        typer.echo(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
    else:
        typer.echo(format_report(report, limit=limit))


@app.command()
def audit(
    manifest_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Path to package.json"),
    json_output: bool = typer.Option(False, "--json", help="Output the full report as JSON"),
    limit: int | None = typer.Option(None, "--limit", "-n", help="Show at most N dependencies"),
    log_level: str | None = typer.Option(None, "--log-level", help="Log level", case_sensitive=False),
):
    """Audit the dependencies declared in a local package.json."""
    config = _load_config(log_level)
    container = _create_container(config)

    try:
        manifest = load_manifest(manifest_path.read_bytes())
        report = container.analyze_uc().execute(manifest=manifest)
    except MalformedManifestError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)
    finally:
        container.shutdown_resources()

    _echo_report(report, json_output=json_output, limit=limit)


@app.command()
def github(
    repo_url: str = typer.Argument(..., help="GitHub repository URL, e.g. https://github.com/owner/name"),
    json_output: bool = typer.Option(False, "--json", help="Output the full report as JSON"),
    limit: int | None = typer.Option(None, "--limit", "-n", help="Show at most N dependencies"),
    log_level: str | None = typer.Option(None, "--log-level", help="Log level", case_sensitive=False),
):
    """Audit the package.json of a GitHub repository."""
    config = _load_config(log_level)
    container = _create_container(config)

    typer.echo(f"Fetching package.json for {repo_url}", err=True)
    try:
        report = container.analyze_github_uc().execute(repo_url=repo_url)
    except (InvalidRepositoryUrlError, MalformedManifestError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)
    except ManifestNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    finally:
        container.shutdown_resources()

    _echo_report(report, json_output=json_output, limit=limit)


@app.command()
def score(
    name: str = typer.Argument(..., help="npm package name"),
    version: str = typer.Argument("latest", help="Declared version (informational)"),
    json_output: bool = typer.Option(False, "--json", help="Output the record as JSON"),
    log_level: str | None = typer.Option(None, "--log-level", help="Log level", case_sensitive=False),
):
    """Score a single npm package."""
    config = _load_config(log_level)
    container = _create_container(config)

    try:
        record = container.scorer().score(name, version).record
    finally:
        container.shutdown_resources()

    if json_output:
        typer.echo(json.dumps(record.to_dict(), ensure_ascii=False, indent=2))
    else:
        typer.echo(format_record(record))


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address (default from config)"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port (default from config)"),
    log_level: str | None = typer.Option(None, "--log-level", help="Log level", case_sensitive=False),
):
    """Run the HTTP API."""
    import uvicorn

    from .api import create_app

    config = _load_config(log_level)
    container = _create_container(config)
    bind_host = host or config.server.host
    bind_port = port or config.server.port

    typer.echo(f"Dependency health API running on http://{bind_host}:{bind_port}")
    typer.echo(f"Health check available at http://{bind_host}:{bind_port}/health")
    uvicorn.run(create_app(container), host=bind_host, port=bind_port, log_level=config.logging.level.lower())


def main() -> None:
    app()


if __name__ == "__main__":
    main()
