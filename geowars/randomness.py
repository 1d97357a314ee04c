"""Shared pseudo-random source used for spawning and visual effects."""

import random as _random

_DEFAULT_SEED = 5489

_engine = _random.Random(_DEFAULT_SEED)


def seed(value):
    """Reseed the shared generator so later draws are reproducible."""
    _engine.seed(value)


def random_float(min_value, max_value):
    """Return a float drawn uniformly from ``[min_value, max_value)``."""
    if min_value > max_value:
        raise ValueError(f"empty range: {min_value} > {max_value}")
    return min_value + (max_value - min_value) * _engine.random()


def random_int(min_value, max_value):
    """Return an integer drawn uniformly from ``[min_value, max_value]``, both inclusive."""
    if min_value > max_value:
        raise ValueError(f"empty range: {min_value} > {max_value}")
    return _engine.randint(min_value, max_value)