from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from sentence_checker.models.rule import Level


class GradeResult(BaseModel):
    score: int = Field(ge=0, le=5)
    messages: List[str]
    # absent when grading short-circuited (unknown exercise or empty text)
    level: Optional[Level] = None


class BatchResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    scores: Dict[str, GradeResult]
    total: int = Field(ge=0)
    max_total: int = Field(alias="maxTotal", ge=0)
    percent: int = Field(ge=0, le=100)


class HealthResponse(BaseModel):
    status: str
    version: str
    exercises: List[str]
