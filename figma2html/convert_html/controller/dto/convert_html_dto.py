from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field


class FigmaConvertRequestDTO(BaseModel):
    file_key: str = Field(
        ..., min_length=1, description="Figma file key or full Figma design URL"
    )
    token: str = Field(..., min_length=1, description="Figma personal access token")
    node_id: Optional[str] = Field(
        default=None, description="Optional node id to convert instead of the document"
    )


@dataclass(frozen=True)
class FigmaConvertResponseDTO:
    html: str
    css: str
