#!/usr/bin/env python3
"""
Basic Usage Example - TraderEdge Position Sizing Engine

This script demonstrates the basic usage of the sizing engine with a few
sample signals. It shows how to:
- Initialize the engine from the cached questionnaire profile
- Size forex, futures and crypto signals
- Handle signals with missing prices
- Apply the losing-streak risk reduction and prop firm limits

Run: python examples/basic_usage.py
"""

from typing import Any, Dict

from traderedge_app.data.models import SizingOutcome
from traderedge_app.engine import SizingEngine
from traderedge_app.logging import configure_logging
from traderedge_app.sizing import TradeOutcome, format_pnl, get_outcome_pnl


def sample_signals() -> list[Dict[str, Any]]:
    """Signals as they arrive from the feed, using assorted field names."""
    return [
        {"pair": "EUR/USD", "direction": "sell", "entry": "1.0845",
         "stopLoss": "1.0875", "takeProfit": [1.0785, 1.0745]},
        {"symbol": "ESZ4", "direction": "buy", "entry_price": 5000,
         "stop_loss": 4990, "take_profit": 5020},
        {"symbol": "BTCUSDT", "direction": "buy", "entryPrice": 67450,
         "stopLoss": 66800, "takeProfit": 68750},
        {"pair": "GBPJPY", "entry": 191.20},
    ]


def print_outcome(raw: Dict[str, Any], outcome: SizingOutcome) -> None:
    """Print sizing details for one signal."""
    symbol = raw.get("pair") or raw.get("symbol")
    if not outcome.success:
        print(f"❌ {symbol}: {outcome.reason} (missing: {', '.join(outcome.missing_fields)})")
        print("-" * 50)
        return

    result = outcome.unwrap()
    print(f"📊 {symbol} ({result.instrument_type.value})")
    print(f"  {result.position_label}: {result.lot_size}")
    print(f"  Risk: ${result.dollar_amount}  Stop: {result.stop_loss_pips}  Target: {result.take_profit_pips}")
    print(f"  If stopped: {format_pnl(get_outcome_pnl(TradeOutcome.STOP_LOSS_HIT, result.potential_profit, result.potential_loss))}")
    print(f"  If target:  {format_pnl(get_outcome_pnl(TradeOutcome.TARGET_HIT, result.potential_profit, result.potential_loss))}")
    print(f"  R:R {result.risk_reward} {'✅' if result.matches_user_preference else '⚠️ below preference'}")
    print(f"  {result.calculation_breakdown}")
    print("-" * 50)


def main():
    """Main demonstration function."""
    configure_logging(level="WARNING")

    print("🚀 TraderEdge Position Sizing Engine - Basic Usage Demo")
    print("=" * 60)

    print("1. Initializing the sizing engine...")
    engine = SizingEngine()
    profile = engine.profile
    print(f"   Account: ${profile.account_size:,.0f}  Risk: {profile.risk_percentage}%  "
          f"Min R:R: {profile.risk_reward_ratio}  Firm: {profile.prop_firm}")
    print()

    print("2. Sizing sample signals...")
    signals = sample_signals()
    for raw, outcome in zip(signals, engine.evaluate_signals(signals)):
        print_outcome(raw, outcome)
    print()

    print("3. Dynamic risk after a losing streak...")
    for losses in (0, 2, 3):
        risk = engine.adjust_risk(losses)
        print(f"   {losses} losses in a row -> risk ${risk:.2f}")
    print()

    print("4. Prop firm limit check...")
    check = engine.check_limits(current_drawdown=-8.5, daily_pnl=-1.2)
    print(f"   Safe: {check.safe}")
    for warning in check.warnings:
        print(f"   ⚠️ {warning}")


if __name__ == "__main__":
    main()
