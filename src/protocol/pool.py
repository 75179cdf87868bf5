"""Pool state and what-if simulation on top of the rate curve."""

from dataclasses import dataclass

from src.data.interfaces import ReserveState
from src.protocol.interest_rate import InterestRateModel
from src.protocol.utilization import utilization


@dataclass(frozen=True)
class PoolState:
    """Pool balances, in the asset's smallest unit."""

    cash: int  # available liquidity
    borrows: int  # outstanding debt

    @property
    def utilization(self) -> int:
        return utilization(self.cash, self.borrows)

    @classmethod
    def from_reserve_state(cls, state: ReserveState) -> "PoolState":
        return cls(cash=state.cash, borrows=state.borrows)


class PoolModel:
    """Pool simulation combining state with rate model."""

    def __init__(self, state: PoolState, rate_model: InterestRateModel) -> None:
        self.state = state
        self.rate_model = rate_model

    @property
    def utilization(self) -> int:
        return self.state.utilization

    @property
    def borrow_rate(self) -> int:
        return self.rate_model.borrow_rate(self.state.cash, self.state.borrows)

    @property
    def supply_rate(self) -> int:
        return self.rate_model.supply_rate(self.state.cash, self.state.borrows)

    def _impact(self, after: PoolState) -> dict[str, int]:
        return {
            "utilization_before": self.utilization,
            "utilization_after": after.utilization,
            "borrow_rate_before": self.borrow_rate,
            "borrow_rate_after": self.rate_model.borrow_rate(after.cash, after.borrows),
            "supply_rate_before": self.supply_rate,
            "supply_rate_after": self.rate_model.supply_rate(after.cash, after.borrows),
        }

    def simulate_borrow(self, amount: int) -> dict[str, int]:
        """Simulate the impact of an additional borrow on rates.

        The borrowed amount leaves the pool's cash and is added to debt.
        Borrowing more than the available cash drains cash to zero.

        Does NOT mutate state.
        """
        drawn = min(amount, self.state.cash)
        after = PoolState(cash=self.state.cash - drawn, borrows=self.state.borrows + drawn)
        return self._impact(after)

    def simulate_withdrawal(self, amount: int) -> dict[str, int]:
        """Simulate the impact of a supplier withdrawal on rates.

        Only cash can be withdrawn; debt stays the same, so utilization
        rises. Withdrawals beyond available cash clamp cash to zero.

        Does NOT mutate state.
        """
        after = PoolState(
            cash=max(0, self.state.cash - amount), borrows=self.state.borrows
        )
        return self._impact(after)

    def simulate_repay(self, amount: int) -> dict[str, int]:
        """Simulate the impact of a debt repayment on rates.

        Repaid funds return to cash; repaying more than the outstanding
        debt only repays the debt.

        Does NOT mutate state.
        """
        repaid = min(amount, self.state.borrows)
        after = PoolState(
            cash=self.state.cash + repaid, borrows=self.state.borrows - repaid
        )
        return self._impact(after)
