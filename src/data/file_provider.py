"""Data provider reading market rate configuration from a JSON file.

Expected layout::

    {
      "USDC": {
        "curve": {"kink": 0.9, "slope_below": "1267505...", ...},
        "fee_bps": 1000,
        "state": {"cash": 420000000000000, "borrows": 1380000000000000}
      }
    }

Curve values given as JSON floats are decimal fractions and are converted
to ray; integers and numeric strings are taken as raw ray values.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from src.data.constants import MAX_RATE
from src.data.interfaces import RateConfig, RateConfigProvider, ReserveState
from src.governance.validation import validate_curve, validate_fee
from src.protocol.curve_params import CurveParams
from src.protocol.errors import OutOfRangeError
from src.protocol.fixed_point import float_to_ray

logger = logging.getLogger(__name__)


def _parse_ray(value: Any) -> int:
    """Read a ray value from a JSON scalar."""
    if isinstance(value, bool):
        raise TypeError(f"expected a number, got {value!r}")
    if isinstance(value, float):
        return float_to_ray(value)
    if isinstance(value, (int, str)):
        return int(value)
    raise TypeError(f"expected a number or numeric string, got {value!r}")


def _parse_market(raw: dict[str, Any]) -> tuple[RateConfig, ReserveState]:
    curve_raw = raw["curve"]
    curve = CurveParams(
        kink=_parse_ray(curve_raw["kink"]),
        slope_below=_parse_ray(curve_raw["slope_below"]),
        slope_above=_parse_ray(curve_raw["slope_above"]),
        base=_parse_ray(curve_raw.get("base", 0)),
    )
    max_rate = _parse_ray(raw.get("max_rate", MAX_RATE))
    fee_bps = int(raw.get("fee_bps", 0))
    validate_curve(curve, max_rate)
    validate_fee(fee_bps)

    state_raw = raw.get("state", {})
    state = ReserveState(
        cash=int(state_raw.get("cash", 0)),
        borrows=int(state_raw.get("borrows", 0)),
    )
    if state.cash < 0 or state.borrows < 0:
        raise OutOfRangeError(
            f"pool balances must be non-negative, got cash={state.cash} "
            f"borrows={state.borrows}"
        )
    return RateConfig(curve=curve, fee_bps=fee_bps, max_rate=max_rate), state


class FileDataProvider(RateConfigProvider):
    """Data provider backed by a JSON configuration file.

    The file is read and validated once, at construction.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        raw = json.loads(self.path.read_text())
        if not isinstance(raw, dict):
            raise TypeError(f"{self.path}: top level must be an object")

        self._configs: dict[str, RateConfig] = {}
        self._states: dict[str, ReserveState] = {}
        for market, entry in raw.items():
            config, state = _parse_market(entry)
            self._configs[market] = config
            self._states[market] = state
        logger.info("Loaded %d markets from %s", len(self._configs), self.path)

    def markets(self) -> list[str]:
        return list(self._configs)

    def get_rate_config(self, market: str) -> RateConfig:
        return self._configs[market]

    def get_reserve_state(self, market: str) -> ReserveState:
        return self._states[market]
