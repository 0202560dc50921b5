"""Export result models."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class MergedPDF(BaseModel):
    """Composited PDF bytes and the number of pages they hold."""

    model_config = ConfigDict(frozen=True)

    data: bytes
    page_count: int = Field(ge=0)


class ExportResult(BaseModel):
    """Descriptor returned to the caller after a PDF has been written."""

    model_config = ConfigDict(frozen=True)

    filename: str
    filepath: Path
    byte_size: int = Field(ge=0)
    page_count: int = Field(ge=0)
