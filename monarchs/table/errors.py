"""Exceptions raised by table transitions."""


class TableError(Exception):
    """Base class for rejected table actions."""


class InsufficientStakeError(TableError):
    """Raised when a deal is attempted with nothing staked."""


class InsufficientBalanceError(TableError):
    """Raised when the total stake exceeds the balance at deal time."""

    def __init__(self, total_stake: int, balance: int):
        super().__init__(f"Total stake {total_stake} exceeds balance {balance}")
        self.total_stake = total_stake
        self.balance = balance


class RoundInProgressError(TableError):
    """Raised when the ledger or a new deal is touched mid-round."""


class InvalidTransitionError(TableError):
    """Raised when a round transition is applied in the wrong stage."""


class StaleRoundError(TableError):
    """Raised when a timer fires for a round that is no longer current."""
