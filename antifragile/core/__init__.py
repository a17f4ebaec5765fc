# antifragile/core/__init__.py
# Core canonical types for the classification engine.
# Authoritative classification source: antifragile.core.triad

from antifragile.core.exceptions import (
    TriadError,
    InvalidTriadValue,
    ParseTriadError,
    RecordFormatError,
)
from antifragile.core.triad import Triad, TRIAD_ALL
from antifragile.core.contract import Antifragile, SupportsPayoff, twin_of
from antifragile.core.convexity import (
    ConvexitySample,
    absolute_difference,
    sample_convexity,
    classify,
    classify_with_tolerance,
)
from antifragile.core.analysis import (
    TriadAnalysis,
    PayoffFunction,
    is_antifragile,
    gains_from_stress,
    is_stable,
)
from antifragile.core.verified import Verified
from antifragile.core.logging_layer import EventLogger, Event, EventFilter, LoggingError
