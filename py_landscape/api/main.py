"""FastAPI main application."""

import logging
from dataclasses import asdict
from typing import Any, Dict, List, Optional, Tuple

import structlog
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from .. import __version__
from ..config import get_preset, list_presets, settings
from ..core.errors import InvalidParameterError
from ..core.export import mesh_to_dict, mesh_to_obj
from ..core.terrain_mesh import TerrainMeshBuilder, TerrainParameters, compute_vertex_normals

# Configure logging
logging.basicConfig(format="%(message)s", level=getattr(logging, settings.log_level.upper(), logging.INFO))

structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.ConsoleRenderer()
        if settings.log_format == "plain"
        else structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()

# Initialize FastAPI app
app = FastAPI(
    title="Landscape Mesh API",
    description="Procedural island terrain meshes from fractal noise",
    version=__version__,
    debug=settings.debug,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response models
class TerrainMeshRequest(BaseModel):
    """Request to generate a terrain mesh. Unset fields come from the preset."""

    preset: Optional[str] = Field(None, description="Preset to start from (defaults to the configured preset)")
    gain: Optional[float] = Field(None, gt=0, le=1, description="Per-octave amplitude and height scale")
    lacunarity: Optional[float] = Field(None, ge=1, le=3, description="Initial frequency multiplier")
    octaves: Optional[int] = Field(None, ge=1, le=8, description="Number of noise octaves")
    scale: Optional[float] = Field(None, gt=0, description="Noise coordinate scale")
    shift: Optional[Tuple[float, float]] = Field(None, description="Noise coordinate offset (x, y)")
    seed: Optional[int] = Field(None, description="Jitter seed")
    resolution: Optional[int] = Field(None, ge=1, description="Grid subdivisions per axis")
    world_length: Optional[float] = Field(None, description="Reserved world size")
    max_height: Optional[float] = Field(None, gt=0, description="Peak height")
    include_buffers: bool = Field(True, description="Return vertex, color and index buffers")
    include_normals: bool = Field(False, description="Return per-vertex normals")


class TerrainMeshResponse(BaseModel):
    """Generated mesh summary and buffers."""

    parameters: Dict[str, Any]
    resolution: int
    vertex_count: int
    triangle_count: int
    min_height: float
    max_height: float
    vertices: Optional[List[List[float]]] = None
    colors: Optional[List[List[float]]] = None
    triangles: Optional[List[int]] = None
    normals: Optional[List[List[float]]] = None


def resolve_parameters(request: TerrainMeshRequest) -> TerrainParameters:
    """Merge request overrides onto the requested preset."""
    preset_name = request.preset or settings.default_preset
    try:
        base = get_preset(preset_name)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    overrides = request.model_dump(
        exclude_none=True, exclude={"preset", "include_buffers", "include_normals"}
    )
    try:
        params = base.replace(**overrides).validate()
    except InvalidParameterError as e:
        raise HTTPException(status_code=422, detail=str(e))

    if params.resolution > settings.max_resolution:
        raise HTTPException(
            status_code=422,
            detail=f"resolution {params.resolution} exceeds limit {settings.max_resolution}",
        )
    return params


@app.on_event("startup")
async def startup_event():
    logger.info("Starting Landscape Mesh API", max_resolution=settings.max_resolution)


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Landscape Mesh API", "version": __version__, "status": "running"}


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/presets")
async def get_presets():
    """List preset names and their parameters."""
    return {name: asdict(get_preset(name)) for name in list_presets()}


@app.post("/terrain/mesh", response_model=TerrainMeshResponse)
def generate_mesh(request: TerrainMeshRequest):
    """Generate a terrain mesh synchronously."""
    params = resolve_parameters(request)
    logger.info("Terrain mesh requested", preset=request.preset, resolution=params.resolution, seed=params.seed)

    # A builder per request: the noise source is reseeded on every sample.
    builder = TerrainMeshBuilder()
    try:
        buffers = builder.generate(params)
    except InvalidParameterError as e:
        logger.error("Terrain generation rejected", error=str(e))
        raise HTTPException(status_code=422, detail=str(e))

    normals = compute_vertex_normals(buffers) if request.include_normals else None
    data = mesh_to_dict(buffers, normals)
    if not request.include_buffers:
        for key in ("vertices", "colors", "triangles"):
            data.pop(key)

    return TerrainMeshResponse(parameters=asdict(params), **data)


@app.get("/terrain/presets/{name}/mesh.obj", response_class=PlainTextResponse)
def preset_mesh_obj(name: str, seed: Optional[int] = None):
    """Generate a preset mesh and return it as Wavefront OBJ text."""
    params = resolve_parameters(TerrainMeshRequest(preset=name, seed=seed))

    buffers = TerrainMeshBuilder().generate(params)
    normals = compute_vertex_normals(buffers)
    return PlainTextResponse(mesh_to_obj(buffers, normals), media_type="text/plain")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=settings.log_level.lower())
