from datetime import datetime

from pydantic import BaseModel


class HealthStatus(BaseModel):
    status: str = "healthy"
    timestamp: datetime
