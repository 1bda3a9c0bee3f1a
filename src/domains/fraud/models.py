"""Pydantic models for the fraud domain."""

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class RiskLevel(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    SAFE = "safe"


class Prediction(BaseModel):
    """Scoring output for one row."""

    model_config = ConfigDict(frozen=True)

    prediction: Literal[0, 1]
    confidence: float = Field(ge=0.5, le=1.0)
    score: float

    @property
    def is_fraud(self) -> bool:
        return self.prediction == 1


class BatchSummary(BaseModel):
    total: int = 0
    fraudulent: int = 0
    legitimate: int = 0
    # Percent, one decimal place
    fraud_rate: float = 0.0


class AccountAssessment(BaseModel):
    row: int = Field(ge=1)
    account: str
    prediction: Literal[0, 1]
    label: str
    confidence: float = Field(ge=0.5, le=1.0)
    risk_level: RiskLevel
    score: float


class QualityIssue(BaseModel):
    field: str
    kind: Literal["missing", "non_numeric"]
    value: str | None = None


class QualityReport(BaseModel):
    rows_inspected: int = 0
    rows_with_issues: int = 0
    missing: dict[str, int] = Field(default_factory=dict)
    non_numeric: dict[str, int] = Field(default_factory=dict)
