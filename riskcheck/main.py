"""
Risk Check FastAPI Application.

Home-security risk assessment backend:
  GET  /questions          → quiz catalog
  POST /assessment         → score answers, attach regional statistics
  GET  /region/{plz}       → simulated burglary statistics
  GET  /geo/...            → address search and coordinates
  POST /leads              → lead notification
  GET  /health             → {"status": "ok"}
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from riskcheck.api.dependencies import close_http_clients
from riskcheck.api.routes.assessment import router as assessment_router
from riskcheck.api.routes.health import router as health_router
from riskcheck.api.routes.leads import router as leads_router
from riskcheck.api.routes.region import router as region_router
from riskcheck.config import settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("riskcheck")


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_http_clients()
    logger.info("HTTP clients closed")


app = FastAPI(
    title="Risk Check",
    description="Home-security risk assessment and lead capture",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(assessment_router)
app.include_router(region_router)
app.include_router(leads_router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    body = await request.body()
    logger.error(f"Validation Error. Raw body: {body.decode('utf-8', 'replace')[:500]} | Errors: {exc.errors()}")
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_errors(exc)},
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    # ctx may hold exception instances that are not JSON serializable
    return [{k: v for k, v in err.items() if k != "ctx"} for err in exc.errors()]


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
