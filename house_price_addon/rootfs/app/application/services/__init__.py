"""Application services for price prediction.

These services orchestrate domain logic to fulfill use cases.
"""

from .valuation_application_service import ValuationApplicationService

__all__ = [
    "ValuationApplicationService",
]
