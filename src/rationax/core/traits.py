from __future__ import annotations

import numpy as np
from frozendict import frozendict

from rationax.core.constants import SIGNED_INTEGER_TYPES
from rationax.core.typing import as_base_type

# position of every base type on the width ladder
_RANK: frozendict[type[np.signedinteger], int] = frozendict(
    {t: i for i, t in enumerate(SIGNED_INTEGER_TYPES)}
)

# widest type maps onto itself
_NEXT: frozendict[type[np.signedinteger], type[np.signedinteger]] = frozendict(
    {t: SIGNED_INTEGER_TYPES[min(i + 1, len(SIGNED_INTEGER_TYPES) - 1)] for t, i in _RANK.items()}
)


def next_type(t) -> type[np.signedinteger]:
    """
    Returns the next wider signed integer type, or the type itself if no wider type exists.
    Used to size the intermediate results of cross-multiplications.

    Args:
        t: base type (anything accepted by as_base_type)

    Returns:
        type[np.signedinteger]: the widened type
    """
    return _NEXT[as_base_type(t)]


def largest_type(t, u) -> type[np.signedinteger]:
    """Returns the wider of two base types, the first one on a tie."""
    t, u = as_base_type(t), as_base_type(u)
    return u if _RANK[u] > _RANK[t] else t
