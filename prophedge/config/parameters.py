"""
Planner configuration using Pydantic.

This module provides the immutable configuration record every planner
computation starts from, together with loaders for mappings, JSON files and
the flat string mapping used to share a plan.

Field constraints only enforce what a single field can be checked for
(finite, non-negative, percentages within 0-100). Contradictory combinations
are accepted and reported by the warning rules instead.
"""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from prophedge.models.exceptions import ConfigurationError


logger = logging.getLogger(__name__)

_BOOL_STRINGS = {"true": True, "false": False}
_STRING_FIELDS = {"instrument"}


class PlannerConfiguration(BaseModel):
    """
    Configuration for a two-phase prop firm challenge with a broker hedge.

    Percentages are expressed 0-100; currency fields are in account currency.
    Every field accepts either its snake_case name or the camelCase name used
    by the flat share mapping.

    Attributes:
        account_size: Challenge account balance (default: 25000).
        phase1_target: Phase 1 profit target, percent (default: 8).
        phase2_target: Phase 2 profit target, percent (default: 6).
        daily_drawdown: Daily loss limit, percent (default: 4).
        max_drawdown: Overall loss limit, percent (default: 10).
        min_trading_days: Minimum trading days per phase (default: 4).
        min_daily_profit: Minimum profit for a day to count, percent (default: 0.5).
        profit_split: Trader share of funded profits, percent (default: 80).
        fee_paid: Challenge fee (default: 100).
        refundable_fee: Whether the fee is refunded on payout (default: True).
        prop_risk: Risk per trade on the prop account (default: 150).
        broker_risk: Risk per trade on the hedge broker (default: 30).
        rr_prop: Prop reward:risk ratio (default: 2).
        rr_broker: Broker reward:risk ratio (default: 1.3).
        max_trades_per_day: Trade cadence cap (default: 2).
        max_losing_streak: Losing streak used to size the deposit (default: 6).
        instrument: Traded instrument label (default: "XAUUSD").
        hedge_ratio: Broker position size relative to prop (default: 0.25).
        broker_is_insurance: Broker leg acts as insurance (default: True).
        prop_win_rate: Assumed prop win rate, percent (default: 55).
        broker_win_rate: Assumed broker win rate, percent (default: 52).
    """

    model_config = ConfigDict(
        frozen=True,
        allow_inf_nan=False,
        populate_by_name=True,
    )

    account_size: float = Field(default=25000.0, ge=0.0, alias="accountSize")
    phase1_target: float = Field(default=8.0, ge=0.0, le=100.0, alias="phase1Target")
    phase2_target: float = Field(default=6.0, ge=0.0, le=100.0, alias="phase2Target")
    daily_drawdown: float = Field(default=4.0, ge=0.0, le=100.0, alias="dailyDrawdown")
    max_drawdown: float = Field(default=10.0, ge=0.0, le=100.0, alias="maxDrawdown")
    min_trading_days: int = Field(default=4, ge=0, alias="minTradingDays")
    min_daily_profit: float = Field(
        default=0.5, ge=0.0, le=100.0, alias="minDailyProfit"
    )
    profit_split: float = Field(default=80.0, ge=0.0, le=100.0, alias="profitSplit")
    fee_paid: float = Field(default=100.0, ge=0.0, alias="feePaid")
    refundable_fee: bool = Field(default=True, alias="refundableFee")

    # Per-trade risk
    prop_risk: float = Field(default=150.0, ge=0.0, alias="propRisk")
    broker_risk: float = Field(default=30.0, ge=0.0, alias="brokerRisk")
    rr_prop: float = Field(default=2.0, ge=0.0, alias="rrProp")
    rr_broker: float = Field(default=1.3, ge=0.0, alias="rrBroker")
    max_trades_per_day: int = Field(default=2, ge=0, alias="maxTradesPerDay")
    max_losing_streak: int = Field(default=6, ge=0, alias="maxLosingStreak")

    # Hedge setup
    instrument: str = Field(default="XAUUSD")
    hedge_ratio: float = Field(default=0.25, ge=0.0, alias="hedgeRatio")
    broker_is_insurance: bool = Field(default=True, alias="brokerIsInsurance")

    # Win-rate assumptions for simulation
    prop_win_rate: float = Field(default=55.0, ge=0.0, le=100.0, alias="propWinRate")
    broker_win_rate: float = Field(
        default=52.0, ge=0.0, le=100.0, alias="brokerWinRate"
    )

    def to_flat_mapping(self) -> dict[str, Any]:
        """
        Return the configuration as a flat ``{camelCaseName: primitive}`` dict.

        Examples:
            >>> PlannerConfiguration().to_flat_mapping()["propRisk"]
            150.0
        """
        return self.model_dump(by_alias=True)

    @classmethod
    def from_flat_mapping(cls, mapping: Mapping[str, Any]) -> "PlannerConfiguration":
        """
        Build a configuration from a flat mapping whose values may be strings.

        ``"true"``/``"false"`` become booleans, numeric strings become numbers
        and any other string is kept as-is. snake_case keys are translated to
        their camelCase names first, so either naming style overrides the same
        field. Keys that are not configuration fields are ignored.

        Raises:
            ConfigurationError: If the decoded values violate field constraints.

        Examples:
            >>> cfg = PlannerConfiguration.from_flat_mapping(
            ...     {"propRisk": "200", "refundableFee": "false"}
            ... )
            >>> cfg.prop_risk, cfg.refundable_fee
            (200.0, False)
        """
        decoded = {}
        for key, value in mapping.items():
            key = _FLAT_KEYS.get(key, key)
            decoded[key] = value if key in _STRING_FIELDS else _coerce_flat_value(value)
        return load_configuration(decoded)


# Both naming styles of every field, mapped to the flat (camelCase) name.
_FLAT_KEYS = {
    key: info.alias or name
    for name, info in PlannerConfiguration.model_fields.items()
    for key in (name, info.alias or name)
}


def flat_field_name(key: str) -> str:
    """
    Return the flat mapping name of a configuration field.

    Args:
        key: Field name in either snake_case or camelCase.

    Raises:
        ConfigurationError: If ``key`` names no configuration field.

    Examples:
        >>> flat_field_name("prop_risk"), flat_field_name("propRisk")
        ('propRisk', 'propRisk')
    """
    try:
        return _FLAT_KEYS[key]
    except KeyError:
        raise ConfigurationError("Unknown configuration field", field=key) from None


def _coerce_flat_value(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    text = value.strip()
    if text.lower() in _BOOL_STRINGS:
        return _BOOL_STRINGS[text.lower()]
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return value


DEFAULT_CONFIGURATION = PlannerConfiguration()


def load_configuration(config_dict: Mapping[str, Any] | None = None) -> PlannerConfiguration:
    """
    Load and validate a planner configuration from a mapping.

    Missing keys take their defaults. Keys may use either naming style.

    Args:
        config_dict: Optional mapping of field overrides. If None, the
            default configuration is returned.

    Returns:
        Validated PlannerConfiguration instance.

    Raises:
        ConfigurationError: If any value violates its field constraints.

    Examples:
        >>> load_configuration().account_size
        25000.0
        >>> load_configuration({"accountSize": 50000}).account_size
        50000.0
    """
    if config_dict is None:
        return DEFAULT_CONFIGURATION
    try:
        return PlannerConfiguration.model_validate(dict(config_dict))
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        raise ConfigurationError(
            f"Invalid planner configuration: {first['msg']}",
            field=field,
            value=first.get("input"),
        ) from exc


def load_configuration_file(path: Path) -> PlannerConfiguration:
    """
    Load a planner configuration from a JSON file containing one object.

    Args:
        path: Path to the JSON file.

    Returns:
        Validated PlannerConfiguration instance.

    Raises:
        ConfigurationError: If the file is missing, is not a JSON object, or
            holds invalid values.
    """
    if not path.exists():
        raise ConfigurationError("Configuration file not found", value=str(path))

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(
            f"Configuration file is not valid JSON: {exc.msg}", value=str(path)
        ) from exc

    if not isinstance(data, dict):
        raise ConfigurationError(
            "Configuration file must contain a JSON object", value=str(path)
        )

    logger.debug("Loaded configuration file %s (%d keys)", path, len(data))
    return load_configuration(data)
