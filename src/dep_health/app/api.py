"""HTTP API for dependency audits."""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncIterator

from fastapi import FastAPI, File, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

from .container import Container
from .main import create_container
from ..core.domain.exceptions import (
    InvalidRepositoryUrlError,
    MalformedManifestError,
    ManifestNotFoundError,
    ReportNotFoundError,
)
from ..core.domain.manifest import load_manifest
from ..core.services.report_builder import build_analysis_response


SERVICE_NAME = "dep-health"


class GitHubAnalyzeRequest(BaseModel):
    repo_url: str = Field(alias="repoUrl", min_length=1)


def _error(status_code: int, error: str, message: str | None = None) -> JSONResponse:
    body = {"error": error}
    if message is not None:
        body["message"] = message
    return JSONResponse(status_code=status_code, content=body)


def _is_json_upload(upload: UploadFile) -> bool:
    return upload.content_type == "application/json" or (upload.filename or "").endswith(".json")


def create_app(container: Container | None = None) -> FastAPI:
    """Build the FastAPI application around a container.

    The container (and with it the report store) lives as long as the app.
    """
    if container is None:
        container = create_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        container.shutdown_resources()

    app = FastAPI(title="Dependency Health Visualizer", version="0.1.0", lifespan=lifespan)
    app.state.container = container
    debug = bool(container.config.server.debug())
    preview_limit = container.config.analysis.preview_limit()

    @app.exception_handler(RequestValidationError)
    async def _invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        if request.url.path.endswith("/github"):
            return _error(400, "Repository URL is required")
        return _error(400, "No package.json file uploaded")

    @app.exception_handler(MalformedManifestError)
    async def _malformed_manifest(request: Request, exc: MalformedManifestError) -> JSONResponse:
        return _error(400, str(exc))

    @app.exception_handler(InvalidRepositoryUrlError)
    async def _invalid_repo(request: Request, exc: InvalidRepositoryUrlError) -> JSONResponse:
        return _error(400, "Invalid GitHub repository URL")

    @app.exception_handler(ManifestNotFoundError)
    async def _manifest_not_found(request: Request, exc: ManifestNotFoundError) -> JSONResponse:
        return _error(404, "Could not find package.json in repository")

    @app.exception_handler(ReportNotFoundError)
    async def _report_not_found(request: Request, exc: ReportNotFoundError) -> JSONResponse:
        return _error(404, "Audit report not found")

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 404:
            return _error(404, "Not found", f"Route {request.url.path} not found")
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def _unexpected(request: Request, exc: Exception) -> JSONResponse:
        container.logger().exception("request_failed", path=request.url.path)
        return _error(500, "Something went wrong!", str(exc) if debug else "Internal server error")

    @app.get("/health")
    def health() -> dict[str, str]:
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "service": SERVICE_NAME,
        }

    @app.post("/api/analyze")
    def analyze_upload(package_json: UploadFile = File(..., alias="packageJson")) -> JSONResponse:
        if not _is_json_upload(package_json):
            return _error(400, "Only JSON files are allowed")
        manifest = load_manifest(package_json.file.read())

        report = container.analyze_uc().execute(manifest=manifest)
        return JSONResponse(build_analysis_response(report, preview_limit=preview_limit))

    @app.post("/api/analyze/github")
    def analyze_github(body: GitHubAnalyzeRequest) -> JSONResponse:
        report = container.analyze_github_uc().execute(repo_url=body.repo_url)
        return JSONResponse(build_analysis_response(report, preview_limit=preview_limit))

    @app.get("/api/reports/{audit_id}")
    def get_report(audit_id: str) -> JSONResponse:
        report = container.report_uc().execute(audit_id=audit_id)
        return JSONResponse(report.to_dict())

    @app.get("/api/export/{audit_id}")
    def export_report(audit_id: str) -> JSONResponse:
        filename, payload = container.export_uc().execute(audit_id=audit_id)
        return JSONResponse(
            payload,
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    return app
