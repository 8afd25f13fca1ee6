"""Mathematical primitives for stable pool calculations.

- Bfp: 18-decimal fixed-point arithmetic (Balancer-style)
"""

from stablejoin.math.fixed_point import AMP_PRECISION, ONE_18, Bfp

__all__ = ["AMP_PRECISION", "ONE_18", "Bfp"]
