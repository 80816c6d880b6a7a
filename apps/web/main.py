"""FastAPI web application for BuildScan."""

from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from buildscan.errors import WorkspaceError
from buildscan.files import is_directory
from buildscan.models import BuildSystemKind
from buildscan.workspace import ProjectReport, scan_project, scan_workspace

app = FastAPI(
    title="BuildScan",
    description="Detect build systems and list manifest dependencies",
    version="0.1.0",
)


class ScanRequest(BaseModel):
    """Request model for scanning one project directory."""
    path: str
    kind: Optional[BuildSystemKind] = None


class WorkspaceRequest(BaseModel):
    """Request model for scanning a workspace root."""
    path: str


class DependencyModel(BaseModel):
    """A single dependency in API responses."""
    name: str
    version_req: Optional[str] = None
    is_path_dep: bool = False
    path: Optional[str] = None
    is_dev: bool = False


class ProjectResponse(BaseModel):
    """Response model for a scanned project."""
    path: str
    dir_name: str
    build_system: BuildSystemKind
    build_systems: list[BuildSystemKind]
    package_name: Optional[str] = None
    package_version: Optional[str] = None
    dependencies: list[DependencyModel]


class WorkspaceResponse(BaseModel):
    """Response model for a scanned workspace."""
    root: str
    projects: list[ProjectResponse]
    skipped_dirs: list[str]


@app.get("/", response_class=HTMLResponse)
async def home():
    """Serve a short landing page."""
    return get_index_html()


@app.get("/api/kinds")
async def list_kinds() -> list[str]:
    """List the supported build systems in detection priority order."""
    return [str(kind) for kind in BuildSystemKind if kind != BuildSystemKind.UNKNOWN]


@app.post("/api/scan", response_model=ProjectResponse)
def scan(request: ScanRequest):
    """Detect the build system of a directory and list its dependencies."""
    directory = Path(request.path)
    if not is_directory(directory):
        raise HTTPException(status_code=400, detail=f"Not a directory: {request.path}")

    return _project_response(scan_project(directory, request.kind))


@app.post("/api/workspace", response_model=WorkspaceResponse)
def workspace(request: WorkspaceRequest):
    """Scan every project directory under a workspace root."""
    try:
        report = scan_workspace(request.path)
    except WorkspaceError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return WorkspaceResponse(
        root=str(report.root),
        projects=[_project_response(project) for project in report.projects],
        skipped_dirs=[str(path) for path in report.skipped_dirs],
    )


def _project_response(report: ProjectReport) -> ProjectResponse:
    return ProjectResponse(
        path=str(report.path),
        dir_name=report.dir_name,
        build_system=report.build_system,
        build_systems=report.build_systems,
        package_name=report.package_name,
        package_version=report.package_version,
        dependencies=[DependencyModel(**dep.to_dict()) for dep in report.dependencies],
    )


def get_index_html() -> str:
    """Generate the landing page HTML."""
    return """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>BuildScan</title>
</head>
<body>
    <h1>BuildScan</h1>
    <p>Detect build systems (Cargo, Cabal, Node) and list manifest dependencies.</p>
    <ul>
        <li><code>POST /api/scan</code> &mdash; scan one project directory</li>
        <li><code>POST /api/workspace</code> &mdash; scan every project under a root</li>
        <li><code>GET /api/kinds</code> &mdash; supported build systems</li>
    </ul>
    <p>Interactive docs: <a href="/docs">/docs</a></p>
</body>
</html>"""
