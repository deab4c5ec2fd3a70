"""Domain layer for the house price prediction engine.

This package contains the scoring models and the ensemble that combines
them, following Domain-Driven Design (DDD) principles.

The domain layer has no dependency on Flask or any other infrastructure
concern; numpy is its only third-party import.
"""
