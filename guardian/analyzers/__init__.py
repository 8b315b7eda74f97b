"""
Guardian Analyzers
===================

Strength estimation, remediation advice and generator uniformity audits.
"""

from guardian.analyzers.advice import AdviceEngine
from guardian.analyzers.strength import EntropyEstimator
from guardian.analyzers.uniformity import UniformityAuditor

__all__ = [
    "AdviceEngine",
    "EntropyEstimator",
    "UniformityAuditor",
]
