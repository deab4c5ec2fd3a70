"""Domain interfaces for price prediction.

Interfaces define contracts between the domain and the layers using it.
The engine depends on these abstractions, not on concrete scorers.
"""

from .price_scorer import IPriceScorer

__all__ = [
    "IPriceScorer",
]
