from pydantic import BaseModel, Field


class RgbResponse(BaseModel):
    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)


class HexResponse(BaseModel):
    hex: str = Field(pattern=r"^#[0-9A-F]{6}$")


class ErrorResponse(BaseModel):
    error: str
