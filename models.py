from typing import List

from pydantic import BaseModel


# Field order is the key order on the wire
class WelcomeResponse(BaseModel):
    message: str
    endpoints: str


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str


class ResumeResponse(BaseModel):
    name: str
    description: str
    technology: str
    features: List[str]
