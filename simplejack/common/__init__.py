"""Cards, decks and console I/O shared by the game modules."""
