"""
AWS Lambda handler — Mangum wrapper for the ProctorView FastAPI app.
"""

from mangum import Mangum

from proctorview.main import app

handler = Mangum(app, lifespan="off")
