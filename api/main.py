"""
FastAPI backend for FrameView - exposes the scene composer as a REST API.

A front-end uploads the workbook and receives the scene description
(group offset, camera, cylinders, endpoint cubes, node points) to draw
with its own 3D runtime.
"""

from fastapi import FastAPI, File, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import List, Optional
import logging
import sys
from pathlib import Path

# Add project root to path to import frame_viewer
sys.path.insert(0, str(Path(__file__).parent.parent))

from frame_viewer import __version__
from frame_viewer.errors import FrameLoadError
from frame_viewer.export import scene_to_dict
from frame_viewer.loader import load_workbook
from frame_viewer.scene import compose_scene

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


app = FastAPI(
    title="FrameView API",
    description="Spreadsheet to 3D frame scene",
    version=__version__,
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Response Models
# =============================================================================

class BoundsData(BaseModel):
    center: List[float]
    size: float


class GroupData(BaseModel):
    """Translation applied to every primitive (centers the frame)."""
    position: List[float]


class CameraData(BaseModel):
    position: List[float]
    target: List[float]
    fov: float


class CylinderData(BaseModel):
    """A member drawn as a cylinder along its node pair."""
    key: str
    start: str
    end: str
    position: List[float]
    quaternion: List[float] = Field(..., description="Rotation (x, y, z, w) of the UP axis onto the member")
    length: float
    radius: float


class EndpointData(BaseModel):
    key: str
    node: str
    position: List[float]
    size: float


class PointData(BaseModel):
    key: str
    node: str
    position: List[float]


class SkippedData(BaseModel):
    start: Optional[str] = None
    end: Optional[str] = None
    reason: str


class SceneResult(BaseModel):
    """Complete scene description of one workbook."""
    version: str
    message: str
    bounds: BoundsData
    group: GroupData
    camera: CameraData
    cylinders: List[CylinderData]
    endpoints: List[EndpointData]
    points: List[PointData]
    skipped: List[SkippedData]


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/")
def root():
    """API info."""
    return {"name": "FrameView API", "version": __version__}


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "ok"}


@app.post("/scene", response_model=SceneResult)
def build_scene(file: UploadFile = File(...)):
    """
    Compose the 3D scene for an uploaded workbook.

    Sheet 1 holds members ("Start Node", "End Node"); sheet 2 holds
    nodes ("Node", "X", "Y", "Z"). Unreadable workbooks and missing or
    empty sheets return 400 with the reason.
    """
    data = file.file.read()
    logger.info(f"Scene requested for {file.filename} ({len(data)} bytes)")

    try:
        dataset = load_workbook(data)
    except FrameLoadError as exc:
        logger.error(f"Error processing file {file.filename}: {exc}")
        raise HTTPException(status_code=400, detail=f"Error processing file: {exc}")

    scene = compose_scene(dataset)
    result = scene_to_dict(scene)
    result['message'] = f"Loaded {len(dataset.members)} members and {len(dataset.nodes)} nodes"
    return result


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
