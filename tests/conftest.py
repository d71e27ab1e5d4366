"""Pytest configuration and shared fixtures."""

import pytest
from pathlib import Path
from typing import Dict, Any

import yaml

from traderedge_app.data.models import RiskProfile, Signal


@pytest.fixture
def default_profile() -> RiskProfile:
    """Default questionnaire profile: $10k, 1% risk, 2:1 reward."""
    return RiskProfile(account_size=10000.0, risk_percentage=1.0, risk_reward_ratio=2.0)


@pytest.fixture
def eurusd_signal() -> Signal:
    """Short EURUSD signal with a 30 pip stop and 60 pip target."""
    return Signal(symbol="EURUSD", entry_price=1.0845, stop_loss=1.0875,
                  take_profit=1.0785, direction="SELL")


@pytest.fixture
def btc_signal() -> Signal:
    """Long BTCUSDT signal with a $650 stop."""
    return Signal(symbol="BTCUSDT", entry_price=67450.0, stop_loss=66800.0,
                  take_profit=68750.0, direction="BUY")


@pytest.fixture
def es_signal() -> Signal:
    """Long E-mini S&P signal with a 10 point stop."""
    return Signal(symbol="ESZ4", entry_price=5000.0, stop_loss=4990.0,
                  take_profit=5020.0, direction="BUY")


@pytest.fixture
def sample_raw_signal() -> Dict[str, Any]:
    """Raw signal payload as stored by the signals feed."""
    return {
        "id": "sig-001",
        "pair": "EUR/USD",
        "direction": "sell",
        "entry": "1.0845",
        "stopLoss": "1.0875",
        "takeProfit": [1.0785, 1.0745],
    }


@pytest.fixture
def write_profile(tmp_path: Path):
    """Write a profile.yaml into a temporary config dir and return the dir."""
    def _write(document: Dict[str, Any]) -> Path:
        with open(tmp_path / "profile.yaml", "w") as f:
            yaml.safe_dump(document, f)
        return tmp_path
    return _write
