import math
import secrets


class TrueRNG:
    """
    A wrapper around Python's `secrets` module to provide cryptographically strong
    random numbers. Holds no state, so concurrent requests can share one instance.
    """

    @staticmethod
    def random_float() -> float:
        """Returns a random float in the range [0.0, 1.0)."""
        # secrets.randbelow(n) returns [0, n). We use a large integer range to approximate a float.
        precision = 10**12
        return secrets.randbelow(precision) / precision

    def random_index(self, size: int) -> int:
        """Returns a random index in the range [0, size)."""
        if size <= 0:
            raise ValueError("size must be a positive integer")
        return math.floor(self.random_float() * size)


rng = TrueRNG()
