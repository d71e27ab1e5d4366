"""Default configuration parameters for the position sizing engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProfileDefaults:
    """Fallbacks used when the questionnaire cache lacks a field."""
    account_size: float = 10000.0                    # Account balance in USD
    risk_percentage: float = 1.0                     # % of balance risked per trade
    risk_reward_ratio: str = "2"                     # Minimum acceptable reward:risk
    prop_firm: str = "FTMO"                          # Rules applied to lot limits


@dataclass(frozen=True)
class SizingParams:
    """Position sizing constants."""
    # Lot sizing
    min_lot_size: float = 0.01                       # Floor applied to every size
    lot_precision: int = 2                           # Decimals for lots/contracts
    crypto_precision: int = 4                        # Decimals for coin quantities

    # Futures
    futures_tick_size: float = 0.25                  # E-mini standard tick

    # Dynamic risk
    consecutive_losses_limit: int = 3                # Losing streak that halves risk
    loss_risk_multiplier: float = 0.5                # Risk scale after the streak

    # Prop firm limits
    limit_warning_ratio: float = 0.8                 # Warn at 80% of a drawdown limit


@dataclass(frozen=True)
class PropFirmRules:
    """Challenge rules published by a prop firm, percentages of the account."""
    max_daily_drawdown: float
    max_total_drawdown: float
    profit_target: float
    min_trading_days: int
    max_position_size: float
    news_restriction: bool
    weekend_holding: bool


PROP_FIRM_RULES: dict[str, PropFirmRules] = {
    "FTMO": PropFirmRules(
        max_daily_drawdown=5, max_total_drawdown=10, profit_target=10,
        min_trading_days=4, max_position_size=100,
        news_restriction=True, weekend_holding=True,
    ),
    "Funded Next": PropFirmRules(
        max_daily_drawdown=5, max_total_drawdown=10, profit_target=10,
        min_trading_days=0, max_position_size=100,
        news_restriction=False, weekend_holding=True,
    ),
    "My Forex Funds": PropFirmRules(
        max_daily_drawdown=5, max_total_drawdown=12, profit_target=8,
        min_trading_days=5, max_position_size=100,
        news_restriction=True, weekend_holding=False,
    ),
    "The5ers": PropFirmRules(
        max_daily_drawdown=4, max_total_drawdown=6, profit_target=8,
        min_trading_days=3, max_position_size=100,
        news_restriction=False, weekend_holding=True,
    ),
    "True Forex Funds": PropFirmRules(
        max_daily_drawdown=5, max_total_drawdown=10, profit_target=8,
        min_trading_days=5, max_position_size=100,
        news_restriction=True, weekend_holding=True,
    ),
}


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    profile: ProfileDefaults
    sizing: SizingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        profile=ProfileDefaults(),
        sizing=SizingParams(),
    )
