# app/schemas/error.py
from pydantic import BaseModel

class ErrorResponse(BaseModel):
    """Error body shared by every service"""
    status: int
    error: str
    message: str
    details: str
    path: str
