"""
This module contains the SessionStats class which is responsible for
tracking the results of the rounds played in a session.
"""

from simplejack.blackjack.rules import RoundOutcome


class SessionStats:
    """
    A class that holds the statistics of a session.
    """

    def __init__(self):
        """
        Initializes the SessionStats with default values.
        """
        self.games_played = 0
        self.player_wins = 0
        self.dealer_wins = 0
        self.draws = 0

    def update(self, outcome: RoundOutcome):
        """Updates the statistics with the outcome of one round."""
        self.games_played += 1
        if outcome.player_won:
            self.player_wins += 1
        elif outcome.player_lost:
            self.dealer_wins += 1
        else:
            self.draws += 1

    def report(self):
        """
        Returns a dictionary containing the current statistics.
        """
        return {
            "games_played": self.games_played,
            "player_wins": self.player_wins,
            "dealer_wins": self.dealer_wins,
            "draws": self.draws,
        }
