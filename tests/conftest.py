"""Shared test fixtures for the account fraud scorer tests."""

import pytest

from src.domains.fraud.config import FraudConfig
from src.domains.fraud.scorer import LinearFraudScorer


def make_row(**overrides) -> dict:
    """A fully populated all-zero row with a zero-valued account."""
    row = {"Time": 0, "Accounts": "0000000000"}
    row.update({f"V{i}": 0 for i in range(1, 29)})
    row.update(overrides)
    return row


@pytest.fixture
def config() -> FraudConfig:
    return FraudConfig()


@pytest.fixture
def scorer(config) -> LinearFraudScorer:
    return LinearFraudScorer(config=config)


@pytest.fixture
def zero_row() -> dict:
    return make_row()


@pytest.fixture
def sample_csv_text() -> str:
    header = ",".join(["Accounts", "Time", *(f"V{i}" for i in range(1, 29)), "Note"])
    fraud_values = ["0"] * 28
    fraud_values[13] = "10"  # V14
    lines = [
        "\ufeff" + header,
        ",".join(["SCB-123-456-7890", "0", *(["0"] * 28), "first"]),
        "",
        ",".join(["BANKX", "86400", *fraud_values, "second"]),
    ]
    return "\n".join(lines) + "\n"
