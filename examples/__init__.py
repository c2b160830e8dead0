"""
Curve sampler examples

Included examples:
- basic_usage.py: sampling, editing and degenerate tangent handling

Run:
    python examples/basic_usage.py
"""

__all__ = []
