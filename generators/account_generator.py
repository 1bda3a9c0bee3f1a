"""Sample bank-account rows for demos and smoke runs."""

from typing import Any

import structlog

from .base import BaseGenerator

logger = structlog.get_logger()

BANKS = ["SCB", "KTB", "BBL", "KBANK", "TTB", "BAY", "GSB", "CIMB", "UOB", "TISCO"]

SAMPLE_HEADERS = ["Accounts", "Time", *(f"V{i}" for i in range(1, 29))]


class AccountGenerator(BaseGenerator):
    def random_account(self) -> str:
        """Identifier like ``KBANK-123-456-7890``."""
        bank = self._choice(self.config.get("banks", BANKS))
        digits = self._digits(10)
        return f"{bank}-{digits[:3]}-{digits[3:6]}-{digits[6:]}"

    def generate(self, num_rows: int = 10) -> list[dict[str, Any]]:
        time_span = self.config.get("time_span_seconds", 172_800)
        spread = self.config.get("feature_spread", 4.0)

        rows: list[dict[str, Any]] = []
        for _ in range(num_rows):
            row: dict[str, Any] = {
                "Accounts": self.random_account(),
                "Time": float(self._np_rng.uniform(0, time_span)),
            }
            components = (self._np_rng.random(28) - 0.5) * spread
            for i, value in enumerate(components, start=1):
                row[f"V{i}"] = float(value)
            rows.append(row)

        logger.info("sample_rows_generated", rows=len(rows), seed=self.seed)
        return rows
