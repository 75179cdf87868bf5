"""Abstract configuration provider interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from src.data.constants import MAX_RATE
from src.protocol.curve_params import CurveParams


@dataclass(frozen=True)
class RateConfig:
    """Rate configuration for a market, owned by the configuration layer."""

    curve: CurveParams
    fee_bps: int = 0  # protocol share of interest, in basis points
    max_rate: int = MAX_RATE  # ceiling for base and slopes


@dataclass(frozen=True)
class ReserveState:
    """Current balances of a pool, in the asset's smallest unit."""

    cash: int  # Available liquidity
    borrows: int  # Outstanding debt


class RateConfigProvider(ABC):
    """Abstract interface for market rate configuration."""

    @abstractmethod
    def markets(self) -> list[str]:
        """List the markets this provider knows about."""

    @abstractmethod
    def get_rate_config(self, market: str) -> RateConfig:
        """Get curve parameters and fee for a market."""

    @abstractmethod
    def get_reserve_state(self, market: str) -> ReserveState:
        """Get a representative pool snapshot for a market."""
