"""
Tolerance tiers for numerical validation.

Defines how closely a computed inverse must reproduce the identity:
- CPU FP64: well-conditioned problems, near machine precision
- CPU FP64 ill-conditioned: condition number above CONDITION_THRESHOLD, relaxed

Used by the test suite and by the inverse residual check in the CPU backend.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance pair for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Reference: A @ inv(A) matches I to 1e-9
CPU_FP64 = ToleranceTier(
    rtol=1e-9,
    atol=1e-9,
    name='cpu_fp64',
    description='CPU double precision, cofactor expansion',
)

# Ill-conditioned problems (Frobenius condition number above the threshold)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned',
)

# Frobenius condition number ||A|| * ||A^-1|| above which the inverse
# is checked against the relaxed tier.
CONDITION_THRESHOLD = 1e8


def select_tolerance(is_ill_conditioned: bool = False) -> ToleranceTier:
    """Select appropriate tolerance tier for a problem."""
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
