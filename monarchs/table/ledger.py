"""
Wager ledger: the stake on each of the seven bet spots.

A ledger is immutable; `place` and `clear` return new ledgers. Placement is
deliberately permissive: stakes may add up to more than the balance, and the
deal is the point where affordability is enforced.

>>> ledger = WagerLedger().place(BetSpot.PLAYER, 100).place("tie", 25)
>>> ledger.total
125
>>> ledger[BetSpot.TIE]
25
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, Tuple, Union

from monarchs.table.constants import BetSpot

SpotKey = Union[BetSpot, str]


def _empty_stakes() -> Dict[BetSpot, int]:
    return {spot: 0 for spot in BetSpot}


@dataclass(frozen=True)
class WagerLedger:
    """
    Immutable mapping of bet spot to staked amount.

    Attributes:
        stakes: Amount on every spot; spots never bet hold 0
    """

    stakes: Dict[BetSpot, int] = field(default_factory=_empty_stakes)

    def __post_init__(self):
        stakes = _empty_stakes()
        for spot, amount in self.stakes.items():
            if amount < 0:
                raise ValueError(f"Stake on {spot} must be non-negative")
            stakes[BetSpot.coerce(spot)] += amount
        object.__setattr__(self, "stakes", stakes)

    @classmethod
    def from_amounts(cls, **amounts: int) -> "WagerLedger":
        """
        Build a ledger from keyword stakes keyed by spot name.

        >>> WagerLedger.from_amounts(badbeat=10, bDragon=10).total
        20
        """
        ledger = cls()
        for name, amount in amounts.items():
            if amount:
                ledger = ledger.place(name, amount)
        return ledger

    def place(self, spot: SpotKey, amount: int) -> "WagerLedger":
        """
        Add ``amount`` to the stake on ``spot``.

        :param spot: Bet spot, or its name
        :param amount: Non-negative integer amount to add; 0 leaves the ledger as is
        :return: The updated ledger
        """
        spot = BetSpot.coerce(spot)
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise ValueError(f"Stake must be an integer, got {amount!r}")
        if amount < 0:
            raise ValueError(f"Stake must be non-negative, got {amount}")
        if amount == 0:
            return self
        stakes = dict(self.stakes)
        stakes[spot] += amount
        return WagerLedger(stakes=stakes)

    def clear(self) -> "WagerLedger":
        """Return a ledger with every spot at 0."""
        return WagerLedger()

    @property
    def total(self) -> int:
        return sum(self.stakes.values())

    @property
    def is_empty(self) -> bool:
        return self.total == 0

    def active_spots(self) -> Tuple[BetSpot, ...]:
        """Spots carrying a non-zero stake, in table order."""
        return tuple(spot for spot in BetSpot if self.stakes[spot])

    def to_dict(self) -> Dict[str, int]:
        """Stakes keyed by wire name."""
        return {spot.value: self.stakes[spot] for spot in BetSpot}

    def __getitem__(self, spot: SpotKey) -> int:
        return self.stakes[BetSpot.coerce(spot)]

    def __iter__(self) -> Iterator[BetSpot]:
        return iter(BetSpot)

    def __len__(self) -> int:
        return len(BetSpot)


def place(ledger: WagerLedger, spot: SpotKey, amount: int) -> WagerLedger:
    return ledger.place(spot, amount)


def clear(ledger: WagerLedger) -> WagerLedger:
    return ledger.clear()


def total(ledger: WagerLedger) -> int:
    return ledger.total
