"""
Bezier curve usage examples

Included examples:
- basic_usage.py: construction, evaluation, derivatives, elevation, segmentation, plotting

Run:
    python examples/basic_usage.py
"""

__all__ = []
