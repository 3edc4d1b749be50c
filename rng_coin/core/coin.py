from typing import List

from rng_coin.core.rng import TrueRNG, rng

COIN_SIDES = ("heads", "tails")


class CoinFlipper:
    """
    Fair 50/50 coin. Every flip is an independent draw from the random source.
    """

    def __init__(self, source: TrueRNG = rng):
        self.source = source

    def flip(self) -> str:
        """Flip the coin once and return "heads" or "tails"."""
        return COIN_SIDES[self.source.random_index(len(COIN_SIDES))]

    def flip_many(self, flips: int) -> List[str]:
        """
        Flip the coin several times.

        Args:
            flips: Number of flips, zero or more

        Returns:
            Outcomes in draw order, one per flip
        """
        if flips < 0:
            raise ValueError(f"flips must not be negative, got {flips}")
        return [self.flip() for _ in range(flips)]


# Singleton instance
coin = CoinFlipper()
