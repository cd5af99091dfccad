"""
Cat Breeder - Deterministic Random Source
Seeded linear congruential generator and the helpers built on top of it.

Every function in the simulation that needs randomness takes a ``RandomFn``
(a zero-argument callable returning a float in [0, 1)). Only the outermost
caller decides whether that is a seeded generator or the non-deterministic
default, so a whole game can be replayed from its seed.
"""

from typing import Callable, Optional, Sequence, TypeVar
import math
import random as _system_random

T = TypeVar("T")

RandomFn = Callable[[], float]

# glibc-style LCG constants, fixed so sequences are portable
LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345
LCG_MODULUS = 2 ** 31


def default_random() -> float:
    """Non-deterministic fallback source."""
    return _system_random.random()


def create_seeded_random(seed: float) -> RandomFn:
    """
    Create a reproducible random source from a seed.

    Negative and fractional seeds are accepted: the seed is floored and its
    sign dropped before reduction modulo 2^31.

    Args:
        seed: Integer (or float) seed.

    Returns:
        Zero-argument function producing floats in [0, 1).
    """
    state = abs(math.floor(seed)) % LCG_MODULUS

    def next_random() -> float:
        nonlocal state
        state = (LCG_MULTIPLIER * state + LCG_INCREMENT) % LCG_MODULUS
        return state / LCG_MODULUS

    return next_random


def resolve(random: Optional[RandomFn]) -> RandomFn:
    """Use the supplied source, or the non-deterministic default when absent."""
    return random if random is not None else default_random


def pick_random(items: Sequence[T], random: Optional[RandomFn] = None) -> T:
    """Pick a uniformly random element of a non-empty sequence."""
    if not items:
        raise ValueError("Cannot pick from an empty sequence")
    rng = resolve(random)
    return items[math.floor(rng() * len(items))]


def coin_flip(heads: T, tails: T, random: Optional[RandomFn] = None) -> T:
    """Return ``heads`` or ``tails`` with equal probability."""
    rng = resolve(random)
    return heads if rng() < 0.5 else tails


def random_int(minimum: int, maximum: int, random: Optional[RandomFn] = None) -> int:
    """Uniform integer in the inclusive range [minimum, maximum]."""
    if maximum < minimum:
        raise ValueError(f"Empty range: {minimum}..{maximum}")
    rng = resolve(random)
    return math.floor(rng() * (maximum - minimum + 1)) + minimum


def normal_random(mean: float = 0.0, std_dev: float = 1.0,
                  random: Optional[RandomFn] = None) -> float:
    """
    Normally distributed value via the Box-Muller transform.

    Consumes exactly two draws and uses only the cosine branch; no second
    value is cached between calls.
    """
    rng = resolve(random)
    # 1 - u keeps the log argument in (0, 1]
    u1 = 1.0 - rng()
    u2 = rng()
    z = math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)
    return mean + z * std_dev
