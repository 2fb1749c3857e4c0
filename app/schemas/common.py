from pydantic import BaseModel


class StatusResponse(BaseModel):
    status: int = 200


class ErrorResponse(BaseModel):
    error: str
