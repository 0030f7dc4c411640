# backend/pricepath/main.py

import logging
from functools import lru_cache
from typing import List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from pricepath import config
from pricepath.chart.cursor import locate
from pricepath.geometry.errors import PathGeometryError
from pricepath.geometry.evaluate import get_y_for_x, path_domain
from pricepath.geometry.interpolate import Extrapolation, interpolate_path, mix_path
from pricepath.geometry.path import Path
from pricepath.geometry.svg import parse, serialize
from pricepath.logging_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="PricePath Chart API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class PathRequest(BaseModel):
    d: str


class YForXRequest(BaseModel):
    d: str
    x: float
    precision: int = 2


class MixRequest(BaseModel):
    value: float
    start: str
    end: str
    extrapolation: Extrapolation = Extrapolation.CLAMP


class InterpolateRequest(BaseModel):
    value: float
    input_range: List[float]
    output_range: List[str]
    extrapolation: Extrapolation = Extrapolation.CLAMP


class CursorRequest(BaseModel):
    d: str
    x: float
    size: float
    min_price: float
    max_price: float
    precision: int = 2


@lru_cache(maxsize=config.PARSE_CACHE_SIZE)
def _parse_cached(d: str) -> Path:
    # Path is frozen, so handing the same instance to every request is fine
    return parse(d)


def _geometry_call(what: str, fn, *args):
    """Run a geometry call, mapping its errors to HTTP status codes."""
    try:
        return fn(*args)
    except PathGeometryError as e:
        logger.info("%s rejected: %s", what, e)
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.exception("%s failed", what)
        raise HTTPException(status_code=500, detail=f"{what} failed: {e}")


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/path/parse")
def parse_path(req: PathRequest):
    """
    Normalize any SVG path description to the move + cubic curves form.

    Returns: JSON { "d", "curves", "closed", "domain": [min_x, max_x] }
    """
    path = _geometry_call("parse", _parse_cached, req.d)
    return JSONResponse({
        "d": serialize(path),
        "curves": len(path.curves),
        "closed": path.close,
        "domain": list(path_domain(path)),
    })


@app.post("/path/y-for-x")
def y_for_x(req: YForXRequest):
    path = _geometry_call("parse", _parse_cached, req.d)
    y = _geometry_call("y-for-x", get_y_for_x, path, req.x, req.precision)
    return {"y": y}


@app.post("/path/mix")
def mix(req: MixRequest):
    start = _geometry_call("parse", _parse_cached, req.start)
    end = _geometry_call("parse", _parse_cached, req.end)
    d = _geometry_call("mix", mix_path, req.value, start, end, req.extrapolation)
    return {"d": d}


@app.post("/path/interpolate")
def interpolate(req: InterpolateRequest):
    paths = [_geometry_call("parse", _parse_cached, d) for d in req.output_range]
    d = _geometry_call(
        "interpolate", interpolate_path, req.value, req.input_range, paths, req.extrapolation
    )
    return {"d": d}


@app.post("/chart/cursor")
def cursor(req: CursorRequest):
    """Snap a drag position to the price path and read the price under it."""
    path = _geometry_call("parse", _parse_cached, req.d)
    pos = _geometry_call(
        "cursor", locate, path, req.x, req.size, req.min_price, req.max_price, req.precision
    )
    return pos._asdict()


# For local dev (from the backend directory):
#   uvicorn pricepath.main:app --reload --host 0.0.0.0 --port 8000
