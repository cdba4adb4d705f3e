"""JSON run report models (pydantic)."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class DocumentReport(BaseModel):
    path: str
    blocks: int = 0
    changed: bool = False
    missing: List[str] = Field(default_factory=list)


class RunReport(BaseModel):
    documents: List[DocumentReport] = Field(default_factory=list)
    referenced_files: List[str] = Field(default_factory=list)

    @property
    def changed(self) -> List[str]:
        return [d.path for d in self.documents if d.changed]


__all__ = ["DocumentReport", "RunReport"]
