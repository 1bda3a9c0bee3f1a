"""Batch summaries and per-account risk levels for scored rows."""

from collections.abc import Mapping, Sequence
from typing import Any

from .config import RiskLevelThresholds, default_config
from .features import ACCOUNT_FIELD, field_value
from .models import AccountAssessment, BatchSummary, Prediction, RiskLevel

NO_ACCOUNT = "—"


def risk_level(
    prediction: Prediction,
    thresholds: RiskLevelThresholds | None = None,
) -> RiskLevel:
    """Bucket a prediction. Legitimate rows are always SAFE."""
    thresholds = thresholds or default_config.risk
    if prediction.prediction != 1:
        return RiskLevel.SAFE
    if prediction.confidence > thresholds.high:
        return RiskLevel.HIGH
    if prediction.confidence > thresholds.medium:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def summarize(predictions: Sequence[Prediction]) -> BatchSummary:
    total = len(predictions)
    fraudulent = sum(1 for p in predictions if p.prediction == 1)
    rate = round(fraudulent / total * 100, 1) if total else 0.0
    return BatchSummary(
        total=total,
        fraudulent=fraudulent,
        legitimate=total - fraudulent,
        fraud_rate=rate,
    )


def assess(
    rows: Sequence[Mapping[str, Any] | None],
    predictions: Sequence[Prediction],
    thresholds: RiskLevelThresholds | None = None,
) -> list[AccountAssessment]:
    """Pair each prediction with its source row's account label.

    Predictions without a matching row get the placeholder account label.
    """
    assessments = []
    for index, pred in enumerate(predictions):
        row = rows[index] if index < len(rows) else None
        account = field_value(row, ACCOUNT_FIELD, NO_ACCOUNT)
        assessments.append(
            AccountAssessment(
                row=index + 1,
                account=str(account),
                prediction=pred.prediction,
                label="Fraudulent" if pred.prediction == 1 else "Legitimate",
                confidence=pred.confidence,
                risk_level=risk_level(pred, thresholds),
                score=pred.score,
            )
        )
    return assessments
