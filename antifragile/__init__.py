# antifragile/__init__.py
# Classify how a system responds to stress: FRAGILE, ROBUST or ANTIFRAGILE.
#
# Standard import pattern:
#   from antifragile import Triad, TriadAnalysis, Verified, classify

from antifragile.core import (
    Antifragile,
    ConvexitySample,
    InvalidTriadValue,
    ParseTriadError,
    PayoffFunction,
    RecordFormatError,
    SupportsPayoff,
    TRIAD_ALL,
    Triad,
    TriadAnalysis,
    TriadError,
    Verified,
    classify,
    classify_with_tolerance,
    gains_from_stress,
    is_antifragile,
    is_stable,
    sample_convexity,
    twin_of,
)

__version__ = "0.1.0"

__all__ = [
    # Contract
    "Antifragile",
    "SupportsPayoff",
    "twin_of",
    # Classification
    "Triad",
    "TRIAD_ALL",
    # Convexity test
    "ConvexitySample",
    "sample_convexity",
    "classify",
    "classify_with_tolerance",
    # Analysis
    "TriadAnalysis",
    "PayoffFunction",
    "is_antifragile",
    "gains_from_stress",
    "is_stable",
    # Wrapper
    "Verified",
    # Exceptions
    "TriadError",
    "InvalidTriadValue",
    "ParseTriadError",
    "RecordFormatError",
]
