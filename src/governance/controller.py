"""Single-writer authority over a market's rate configuration.

The controller owns the current ``RateConfig`` and the last computed
``RateSnapshot``.  Parameter changes are restricted to the governor and
snapshot recomputation to the keeper; the math core is called with the
configuration by value and never sees the roles.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace

from src.data.constants import MAX_COMPOUNDING_PERIODS
from src.data.interfaces import RateConfig
from src.governance.validation import validate_curve, validate_fee
from src.protocol.curve_params import CurveParams
from src.protocol.errors import StaleSnapshotError, UnauthorizedError
from src.protocol.interest_rate import (
    rate_at_utilization,
    supply_rate_at_utilization,
)
from src.protocol.utilization import utilization
from src.protocol.yields import apr_to_apy, per_second_to_apr

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RateSnapshot:
    """Rates computed for one pool observation, all ray-scaled."""

    marker: int  # monotonically increasing, e.g. a block number
    utilization: int
    borrow_rate_per_second: int
    supply_rate_per_second: int
    borrow_apr: int
    borrow_apy: int


class RateController:
    """Governor/keeper gated holder of a market's rate configuration."""

    def __init__(self, config: RateConfig, governor: str, keeper: str) -> None:
        validate_curve(config.curve, config.max_rate)
        validate_fee(config.fee_bps)
        self._config = config
        self._governor = governor
        self._keeper = keeper
        self._last_snapshot: RateSnapshot | None = None
        self._lock = threading.Lock()

    @property
    def config(self) -> RateConfig:
        return self._config

    @property
    def governor(self) -> str:
        return self._governor

    @property
    def keeper(self) -> str:
        return self._keeper

    @property
    def last_snapshot(self) -> RateSnapshot | None:
        return self._last_snapshot

    def _require(self, caller: str, role: str, action: str) -> None:
        # Requires self._lock held.
        allowed = self._governor if role == "governor" else self._keeper
        if caller != allowed:
            logger.warning("Rejected %s by %s: %s only", action, caller, role)
            raise UnauthorizedError(f"{action} requires {role}, got {caller}")

    def set_curve(self, caller: str, curve: CurveParams) -> None:
        """Replace the rate curve. Governor only."""
        with self._lock:
            self._require(caller, "governor", "set_curve")
            validate_curve(curve, self._config.max_rate)
            old = self._config.curve
            self._config = replace(self._config, curve=curve)
        logger.info("Curve updated by %s: %s -> %s", caller, old, curve)

    def set_fee(self, caller: str, fee_bps: int) -> None:
        """Replace the protocol fee. Governor only."""
        with self._lock:
            self._require(caller, "governor", "set_fee")
            validate_fee(fee_bps)
            old = self._config.fee_bps
            self._config = replace(self._config, fee_bps=fee_bps)
        logger.info("Fee updated by %s: %d -> %d bps", caller, old, fee_bps)

    def set_keeper(self, caller: str, keeper: str) -> None:
        """Hand the keeper role to another actor. Governor only."""
        with self._lock:
            self._require(caller, "governor", "set_keeper")
            old = self._keeper
            self._keeper = keeper
        logger.info("Keeper changed by %s: %s -> %s", caller, old, keeper)

    def recompute(
        self,
        caller: str,
        marker: int,
        cash: int,
        borrows: int,
        periods_per_year: int = MAX_COMPOUNDING_PERIODS,
    ) -> RateSnapshot:
        """Compute and store rates for a new pool observation. Keeper only.

        ``marker`` must be strictly greater than the previous snapshot's.
        """
        with self._lock:
            self._require(caller, "keeper", "recompute")
            previous = self._last_snapshot
            if previous is not None and marker <= previous.marker:
                raise StaleSnapshotError(
                    f"marker {marker} does not advance past {previous.marker}"
                )

            config = self._config
            u = utilization(cash, borrows)
            borrow_rate = rate_at_utilization(u, config.curve)
            apr = per_second_to_apr(borrow_rate)
            snapshot = RateSnapshot(
                marker=marker,
                utilization=u,
                borrow_rate_per_second=borrow_rate,
                supply_rate_per_second=supply_rate_at_utilization(
                    u, config.curve, config.fee_bps
                ),
                borrow_apr=apr,
                borrow_apy=apr_to_apy(apr, periods_per_year),
            )
            self._last_snapshot = snapshot

        logger.debug("Snapshot %d: utilization=%d rate=%d", marker, u, borrow_rate)
        return snapshot
