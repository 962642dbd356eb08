"""
ProctorView FastAPI Application — candidate review engine for proctoring results.

  POST /candidates/filter   → search + criteria filtering with violation summaries
  POST /candidates/stats    → violation bucket statistics
  POST /violations/summary  → per-type violation summaries
  /criteria/*               → pure criteria updates
  /presets                  → built-in and session presets
  GET  /health              → {"status": "ok"}
"""

from __future__ import annotations

import logging

from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from proctorview.api.routes.candidates import router as candidates_router
from proctorview.api.routes.criteria import router as criteria_router
from proctorview.api.routes.health import router as health_router
from proctorview.api.routes.presets import router as presets_router
from proctorview.config import settings
from proctorview.core.errors import InvalidFilterKey, PresetNotFound, PresetValidationError

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("proctorview")

app = FastAPI(
    title=settings.app_name,
    description="Filter and summarize exam proctoring violations for candidate review",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(candidates_router)
app.include_router(criteria_router)
app.include_router(presets_router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    body = await request.body()
    logger.error(f"Validation Error. Raw body: {body.decode('utf-8')[:500]} | Errors: {exc.errors()}")
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_errors(exc), "body": body.decode("utf-8")[:100]},
    )


@app.exception_handler(InvalidFilterKey)
async def invalid_filter_key_handler(request: Request, exc: InvalidFilterKey):
    logger.warning(f"Rejected filter update: {exc}")
    return JSONResponse(
        status_code=400,
        content={"detail": str(exc), "category": exc.category, "key": exc.key},
    )


@app.exception_handler(PresetValidationError)
async def preset_validation_handler(request: Request, exc: PresetValidationError):
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(PresetNotFound)
async def preset_not_found_handler(request: Request, exc: PresetNotFound):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Validation errors with exception objects in 'ctx' rendered as text."""
    errors = []
    for err in exc.errors():
        err = dict(err)
        if "ctx" in err:
            err["ctx"] = {k: str(v) for k, v in err["ctx"].items()}
        errors.append(err)
    return errors
