"""
Health Check Route — GET /health
"""

from __future__ import annotations

from fastapi import APIRouter

from riskcheck.core.catalog import QUESTIONS

router = APIRouter()


@router.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": "1.0.0",
        "questions": len(QUESTIONS),
    }
