"""Seed selection for reproducible deals.

Deals never touch global random state: each showdown builds its own
`numpy.random.Generator` from a seed. This module only decides that seed.
"""

from typing import Optional

import numpy as np

MAX_SEED = 2**32


def resolve_seed(seed: Optional[int] = None) -> int:
    """Return `seed`, or draw a fresh one from OS entropy when it is None.

    The returned value can be logged and passed back later to replay a deal.

    Example:
        >>> from mini_poker import resolve_seed
        >>> resolve_seed(42)
        42
    """
    if seed is not None:
        return seed
    return int(np.random.default_rng().integers(0, MAX_SEED))
