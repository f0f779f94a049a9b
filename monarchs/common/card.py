"""
This module defines the `Suit`, `Rank`, and `Card` classes used at the table.

- `Suit`: An enum representing the four suits of a standard deck: Spades,
Hearts, Diamonds and Clubs.

- `Rank`: An enum representing the thirteen ranks. The enum value is the
comparison value of the rank: Ace is lowest (1) and King highest (13).

- `Card`: An immutable playing card. Two cards are compared by value only;
suit never breaks a tie.
"""

from dataclasses import dataclass
from enum import Enum, unique


@unique
class Suit(Enum):
    """
    Enum for suits in a card deck.
    """

    SPADES = "S"
    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"

    @property
    def symbol(self) -> str:
        return _SUIT_SYMBOLS[self]

    def __str__(self) -> str:
        return self.symbol


_SUIT_SYMBOLS = {
    Suit.SPADES: "♠",
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
}


@unique
class Rank(Enum):
    """
    Enum for ranks in a card deck, valued Ace low through King high.
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def rank_value(self) -> int:
        """The comparison value of the rank."""
        return self.value

    @property
    def rank_str(self) -> str:
        """Short label: A, 2..10, J, Q, K."""
        if self in (Rank.ACE, Rank.JACK, Rank.QUEEN, Rank.KING):
            return self.name[0]
        return str(self.value)

    @property
    def is_face(self) -> bool:
        return self.value >= Rank.JACK.value

    @classmethod
    def from_str(cls, label: str) -> "Rank":
        """
        Look up a rank by its short label.

        >>> Rank.from_str("Q")
        <Rank.QUEEN: 12>
        """
        for rank in cls:
            if rank.rank_str == label.upper():
                return rank
        raise ValueError(f"Invalid rank: {label!r}")

    def __str__(self) -> str:
        return self.rank_str


@dataclass(frozen=True)
class Card:
    """
    Immutable playing card.

    >>> card = Card(Suit.HEARTS, Rank.KING)
    >>> print(card)
    K of ♥
    >>> card.value
    13
    """

    suit: Suit
    rank: Rank

    def __post_init__(self):
        if not isinstance(self.suit, Suit):
            raise TypeError(f"Invalid suit: {self.suit}")
        if not isinstance(self.rank, Rank):
            raise TypeError(f"Invalid rank: {self.rank}")

    @classmethod
    def parse(cls, text: str) -> "Card":
        """
        Build a card from a compact code such as ``"KS"`` or ``"10h"``.

        The last character is the suit code, the rest is the rank label.
        """
        text = text.strip()
        if len(text) < 2:
            raise ValueError(f"Invalid card code: {text!r}")
        try:
            suit = Suit(text[-1].upper())
        except ValueError:
            raise ValueError(f"Invalid card code: {text!r}") from None
        return cls(suit, Rank.from_str(text[:-1]))

    @property
    def value(self) -> int:
        """Comparison value, 1 (Ace) to 13 (King)."""
        return self.rank.value

    @property
    def is_face(self) -> bool:
        return self.rank.is_face

    @property
    def code(self) -> str:
        return f"{self.rank.rank_str}{self.suit.value}"

    def sort_key(self):
        return (self.suit.value, self.rank.value)

    def __repr__(self) -> str:
        return f"Card(Suit.{self.suit.name}, Rank.{self.rank.name})"

    def __str__(self) -> str:
        return f"{self.rank.rank_str} of {self.suit}"
