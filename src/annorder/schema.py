from __future__ import annotations

from typing import Dict, List, Optional, Union

from pydantic import BaseModel


class AnnotationDTO(BaseModel):
    name: str
    line: Optional[int] = None
    column: Optional[int] = None


class DeclarationRecordDTO(BaseModel):
    path: str = "<input>"
    line: int = 1
    column: int = 1
    site: Optional[str] = None
    kind: Optional[str] = None
    annotations: List[Union[AnnotationDTO, str]] = []


class FindingDTO(BaseModel):
    path: str
    line: int
    column: int
    kind: str
    message: str
    annotation: Optional[str] = None
    declaration: Optional[str] = None


class CheckReportDTO(BaseModel):
    findings: List[FindingDTO] = []
    summary: Dict[str, int] = {}


class CatalogDTO(BaseModel):
    orders: Dict[str, List[str]]
    exempt_prefixes: Dict[str, List[str]] = {}
    report_unranked: bool = True
