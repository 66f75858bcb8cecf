"""Measurements over simulated generations."""

from .metrics import (
    population,
    hamming_distance,
    find_period,
    find_translation
)

__all__ = [
    'population',
    'hamming_distance',
    'find_period',
    'find_translation'
]
