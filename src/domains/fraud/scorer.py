"""Fraud scoring pipeline: extract -> scale -> score -> map."""

import asyncio
import math
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import structlog

from .config import FraudConfig, LinearModel, default_config
from .features import extract_features, scale_features
from .models import Prediction

logger = structlog.get_logger()


def sigmoid(x: float) -> float:
    """Logistic function, stable for large magnitudes. NaN maps to 0.5."""
    if math.isnan(x):
        return 0.5
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


def linear_score(scaled: Mapping[str, float], model: LinearModel) -> float:
    """Bias plus the weighted sum over every weight-table key."""
    score = model.bias
    for name, weight in model.weights.items():
        score += (scaled.get(name) or 0.0) * weight
    return score


def to_prediction(score: float, model: LinearModel) -> Prediction:
    probability = sigmoid(score)
    label = 1 if probability > model.decision_threshold else 0
    confidence = probability if label == 1 else 1.0 - probability
    return Prediction(prediction=label, confidence=confidence, score=score)


class LinearFraudScorer:
    """Scores rows against the fixed linear model.

    Holds no per-row state; one instance can score any number of batches.
    """

    def __init__(self, config: FraudConfig | None = None) -> None:
        self._config = config or default_config
        self._model = self._config.model

    @property
    def model(self) -> LinearModel:
        return self._model

    def score_row(self, row: Mapping[str, Any] | None) -> Prediction:
        """Run the full pipeline for a single row."""
        features = extract_features(row)
        scaled = scale_features(row, features, self._model)
        return to_prediction(linear_score(scaled, self._model), self._model)

    def predict(self, rows: Iterable[Mapping[str, Any] | None]) -> list[Prediction]:
        """Score a batch. Returns a list aligned with the input."""
        predictions = [self.score_row(row) for row in rows]
        self._log_batch(predictions)
        return predictions

    async def predict_async(
        self,
        rows: Sequence[Mapping[str, Any] | None],
        chunk_size: int | None = None,
    ) -> list[Prediction]:
        """Score a batch in chunks, yielding to the event loop between them.

        Produces exactly what ``predict`` produces for the same rows.
        """
        size = max(1, chunk_size or self._config.batch.chunk_size)
        predictions: list[Prediction] = []
        for start in range(0, len(rows), size):
            predictions.extend(self.score_row(row) for row in rows[start : start + size])
            await asyncio.sleep(0)
        self._log_batch(predictions, chunk_size=size)
        return predictions

    def _log_batch(self, predictions: list[Prediction], **extra: Any) -> None:
        fraudulent = sum(1 for p in predictions if p.prediction == 1)
        logger.info(
            "batch_scored",
            rows=len(predictions),
            fraudulent=fraudulent,
            legitimate=len(predictions) - fraudulent,
            **extra,
        )


_default_scorer: LinearFraudScorer | None = None


def get_scorer(config: FraudConfig | None = None) -> LinearFraudScorer:
    """Get or create the module-level scorer."""
    global _default_scorer
    if _default_scorer is None:
        _default_scorer = LinearFraudScorer(config=config)
    return _default_scorer


def predict(rows: Iterable[Mapping[str, Any] | None]) -> list[Prediction]:
    """Score rows with the default scorer."""
    return get_scorer().predict(rows)
