"""
This module contains the Deck class, which represents one or more standard
decks of cards combined into a single sequence, and `new_shoe`, which the
game state draws its cards from.

>>> deck = Deck(num_decks=3)
>>> deck.size
156
>>> deck.cards[0]
Card(Suit.SPADES, Rank.ACE)
"""

import random
from typing import List, Optional

from simplejack.common.card import Card, Rank, Suit


class Deck:
    """
    A class representing a combined deck of cards.

    An unshuffled deck lists every suit in order, Ace of Spades first.
    """

    # Precompute a single standard deck
    _default_deck = [Card(suit, rank) for suit in Suit for rank in Rank]

    def __init__(self, num_decks: int = 1):
        """
        Initialize a Deck instance.

        :param num_decks: Number of 52-card decks to combine (default is 1)
        >>> Deck().size
        52
        """
        if num_decks < 1:
            raise ValueError("Number of decks must be at least 1")
        self.num_decks = num_decks
        self.cards: List[Card] = self.initialize_default_deck()

    def initialize_default_deck(self) -> List[Card]:
        """
        Construct `num_decks` standard decks concatenated in order.

        :return: A list of Card instances representing the combined deck.
        """
        return self._default_deck * self.num_decks

    def shuffle(self, rng: Optional[random.Random] = None) -> "Deck":
        """
        Shuffle the cards in the deck into a uniformly random order.

        :param rng: Optional random generator, for reproducible shuffles.
        """
        (rng or random).shuffle(self.cards)
        return self

    @property
    def size(self) -> int:
        """
        Return the number of cards in the deck.
        """
        return len(self.cards)


def new_shoe(num_decks: int = 3, rng: Optional[random.Random] = None) -> List[Card]:
    """
    Build `num_decks` combined decks in a uniformly random order.

    :return: The shuffled cards as a list, front of the list dealt first.
    """
    return Deck(num_decks=num_decks).shuffle(rng).cards
