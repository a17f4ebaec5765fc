# antifragile/storage/record_serializer.py
# Serializes Triad values and Verified wrappers to JSON-compatible records.
#
# WIRE FORMS:
#   A Triad is written as its canonical lowercase token ("fragile", "robust",
#   "antifragile") or as its rank (0, 1, 2). No other representation is
#   emitted, so every record round-trips through Triad.parse() /
#   Triad.from_byte() in any process.
#
# VERIFIED RECORD LAYOUT:
#   {
#     "format_version": STORAGE_FORMAT_VERSION,
#     "classification": <token>,
#     "rank":           <rank>,
#     "inner":          <dataclasses.asdict(system)>
#   }
#   Only dataclass systems are serializable. Their fields must be JSON
#   compatible; non-finite floats are rejected at dump time.
#
# The classification core never imports this module.

import dataclasses
import json
from pathlib import Path
from typing import Any, Dict, Union

from antifragile.core.triad import Triad
from antifragile.core.verified import Verified
from antifragile.utils.constants import STORAGE_FORMAT_VERSION


def serialize_triad(triad: Triad, form: str = "token") -> Union[str, int]:
    """
    Triad to its wire form.

    Parameters
    ----------
    triad : Triad member.
    form  : "token" (default) for the lowercase token, "rank" for 0/1/2.

    Raises
    ------
    TypeError  : If triad is not a Triad member.
    ValueError : If form is not "token" or "rank".
    """
    if not isinstance(triad, Triad):
        raise TypeError("serialize_triad: expected a Triad; got: " + repr(triad))
    if form == "token":
        return triad.as_str()
    if form == "rank":
        return triad.to_byte()
    raise ValueError("serialize_triad: form must be 'token' or 'rank'; got: " + repr(form))


def serialize_verified(verified: Verified) -> Dict[str, Any]:
    """
    Verified wrapper to a record dict.

    Raises
    ------
    TypeError : If verified is not a Verified, or its system is not a
                dataclass instance.
    """
    if not isinstance(verified, Verified):
        raise TypeError("serialize_verified: expected a Verified; got: " + repr(verified))
    system = verified.inner
    if not dataclasses.is_dataclass(system) or isinstance(system, type):
        raise TypeError(
            "serialize_verified: only dataclass systems are serializable; got: "
            + type(system).__name__
        )
    classification = verified.classification
    return {
        "format_version": STORAGE_FORMAT_VERSION,
        "classification": classification.as_str(),
        "rank":           classification.to_byte(),
        "inner":          dataclasses.asdict(system),
    }


class VerifiedSerializer:
    """
    Canonical JSON for Verified wrappers: sorted keys, no NaN/Inf.
    """

    def dumps(self, verified: Verified) -> str:
        return json.dumps(serialize_verified(verified), sort_keys=True, allow_nan=False)

    def dump(self, verified: Verified, path: Path) -> Path:
        """
        Write one record to path, creating parent directories.
        Returns path.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.dumps(verified))
        return path


__all__ = ["serialize_triad", "serialize_verified", "VerifiedSerializer"]
