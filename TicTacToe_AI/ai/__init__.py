"""Search engines for the computer player."""
