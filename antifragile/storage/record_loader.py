# antifragile/storage/record_loader.py
# Loads Triad values and Verified wrappers from serialized records.
#
# Accepts exactly the wire forms written by record_serializer:
#   - int  -> Triad.from_byte()   (InvalidTriadValue on anything but 0/1/2)
#   - str  -> Triad.parse()       (ParseTriadError on unknown tokens)
#
# Verified records are validated before the wrapper is rebuilt:
#   - format_version must equal STORAGE_FORMAT_VERSION.
#   - when both "classification" and "rank" are present they must agree.
# Violations raise RecordFormatError. Missing keys raise KeyError,
# propagated without wrapping.
#
# The stored classification is restored as-is; the convexity test is not
# re-run. Use Verified.still_holds() afterwards to check it against the
# rebuilt system.

import json
from pathlib import Path
from typing import Any, Dict, Type, TypeVar

from antifragile.core.exceptions import InvalidTriadValue, RecordFormatError
from antifragile.core.triad import Triad
from antifragile.core.verified import Verified
from antifragile.utils.constants import STORAGE_FORMAT_VERSION


T = TypeVar("T")


def load_triad(value: Any) -> Triad:
    """
    Wire form to Triad.

    Raises
    ------
    InvalidTriadValue : For ints outside {0, 1, 2}, bools, and any type that
                        is neither int nor str.
    ParseTriadError   : For unrecognised strings.
    """
    if isinstance(value, str):
        return Triad.parse(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return Triad.from_byte(value)
    raise InvalidTriadValue(value)


def load_verified(payload: Dict[str, Any], system_type: Type[T]) -> Verified:
    """
    Rebuild a Verified wrapper from a record dict.

    Parameters
    ----------
    payload     : Record as produced by serialize_verified().
    system_type : Dataclass type; the system is rebuilt as
                  system_type(**payload["inner"]).

    Raises
    ------
    RecordFormatError : Unknown format_version, or token and rank disagree.
    KeyError          : Required key missing.
    """
    version = payload["format_version"]
    if version != STORAGE_FORMAT_VERSION:
        raise RecordFormatError(
            "unsupported format_version " + repr(version)
            + " (expected " + repr(STORAGE_FORMAT_VERSION) + ")",
            value=version,
        )

    classification = load_triad(payload["classification"])
    if "rank" in payload:
        by_rank = load_triad(payload["rank"])
        if by_rank is not classification:
            raise RecordFormatError(
                "classification " + repr(payload["classification"])
                + " disagrees with rank " + repr(payload["rank"]),
                value=payload["rank"],
            )

    system = system_type(**payload["inner"])
    return Verified._restore(system, classification)


class VerifiedLoader:
    """Counterpart of VerifiedSerializer."""

    def __init__(self, system_type: Type[T]) -> None:
        self._system_type = system_type

    def loads(self, text: str) -> Verified:
        return load_verified(json.loads(text), self._system_type)

    def load(self, path: Path) -> Verified:
        with open(Path(path), "r", encoding="utf-8") as f:
            return self.loads(f.read())


__all__ = ["load_triad", "load_verified", "VerifiedLoader"]
