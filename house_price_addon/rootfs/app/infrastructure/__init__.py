"""Infrastructure layer for the house price prediction engine.

This package exposes the domain to external callers (HTTP API).
"""
