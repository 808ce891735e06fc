from datetime import datetime

from pydantic import BaseModel


class ProblemDetail(BaseModel):
    """Error body in the shape of RFC 7807 Problem Details, plus a timestamp."""
    type: str = "about:blank"
    title: str
    status: int
    detail: str
    instance: str
    timestamp: datetime
