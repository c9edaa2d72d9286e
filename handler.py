"""
AWS Lambda handler — Mangum wrapper for FastAPI.
"""

from mangum import Mangum

from riskcheck.main import app

handler = Mangum(app, lifespan="off")
