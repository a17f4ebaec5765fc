# tests/unit/storage/test_record_serializer.py
# Target: antifragile/storage/record_serializer.py, record_loader.py

import json

import pytest

from antifragile.core.exceptions import (
    InvalidTriadValue,
    ParseTriadError,
    RecordFormatError,
)
from antifragile.core.triad import Triad
from antifragile.core.verified import Verified
from antifragile.storage import (
    VerifiedLoader,
    VerifiedSerializer,
    load_triad,
    load_verified,
    serialize_triad,
    serialize_verified,
)
from antifragile.utils.constants import STORAGE_FORMAT_VERSION


class TestSerializeTriad:
    def test_token_form_default(self):
        assert serialize_triad(Triad.ANTIFRAGILE) == "antifragile"

    def test_rank_form(self):
        assert serialize_triad(Triad.ANTIFRAGILE, form="rank") == 2
        assert serialize_triad(Triad.FRAGILE, form="rank") == 0

    def test_unknown_form(self):
        with pytest.raises(ValueError):
            serialize_triad(Triad.ROBUST, form="name")

    def test_non_triad(self):
        with pytest.raises(TypeError):
            serialize_triad("robust")


class TestLoadTriad:
    @pytest.mark.parametrize("member", list(Triad))
    def test_both_wire_forms(self, member):
        assert load_triad(serialize_triad(member)) is member
        assert load_triad(serialize_triad(member, form="rank")) is member

    def test_case_insensitive_token(self):
        assert load_triad("Robust") is Triad.ROBUST

    def test_bad_rank(self):
        with pytest.raises(InvalidTriadValue):
            load_triad(3)

    def test_bad_token(self):
        with pytest.raises(ParseTriadError):
            load_triad("sturdy")

    @pytest.mark.parametrize("value", [None, 1.0, True, ["robust"]])
    def test_other_types(self, value):
        with pytest.raises(InvalidTriadValue):
            load_triad(value)


class TestSerializeVerified:
    def test_record_layout(self, linear):
        record = serialize_verified(Verified.check(linear, 10, 1))
        assert record == {
            "format_version": STORAGE_FORMAT_VERSION,
            "classification": "robust",
            "rank": 1,
            "inner": {"slope": 2, "intercept": 5},
        }

    def test_non_dataclass_system_rejected(self):
        class _Plain:
            def payoff(self, stressor):
                return stressor

        with pytest.raises(TypeError):
            serialize_verified(Verified.check(_Plain(), 1, 1))

    def test_non_verified_rejected(self, linear):
        with pytest.raises(TypeError):
            serialize_verified(linear)

    def test_dumps_is_canonical(self, convex):
        text = VerifiedSerializer().dumps(Verified.check(convex, 10.0, 1.0))
        assert text == json.dumps(json.loads(text), sort_keys=True)

    def test_dumps_rejects_non_finite_fields(self, convex):
        system = type(convex)(scale=float("nan"))
        with pytest.raises(ValueError):
            VerifiedSerializer().dumps(Verified.check(system, 10.0, 1.0))

    def test_dump_creates_parent_dirs(self, convex, tmp_path):
        path = tmp_path / "nested" / "dir" / "record.json"
        returned = VerifiedSerializer().dump(Verified.check(convex, 10.0, 1.0), path)
        assert returned == path
        assert json.loads(path.read_text(encoding="utf-8"))["classification"] == "antifragile"


class TestLoadVerified:
    def test_restores_system_and_classification(self, concave):
        original = Verified.check(concave, 10.0, 1.0)
        restored = load_verified(serialize_verified(original), type(concave))
        assert restored == original
        assert restored.classification is Triad.FRAGILE

    def test_restored_classification_not_recomputed(self, convex):
        # A stored label is trusted as-is; still_holds() exposes the mismatch.
        record = {
            "format_version": STORAGE_FORMAT_VERSION,
            "classification": "fragile",
            "rank": 0,
            "inner": {"scale": 1.0},
        }
        restored = load_verified(record, type(convex))
        assert restored.classification is Triad.FRAGILE
        assert not restored.still_holds(10.0, 1.0)

    def test_rank_optional(self, linear):
        record = {
            "format_version": STORAGE_FORMAT_VERSION,
            "classification": "robust",
            "inner": {"slope": 2, "intercept": 5},
        }
        assert load_verified(record, type(linear)).classification is Triad.ROBUST

    def test_version_mismatch(self, linear):
        record = serialize_verified(Verified.check(linear, 10, 1))
        record["format_version"] = "0.9.0"
        with pytest.raises(RecordFormatError) as exc_info:
            load_verified(record, type(linear))
        assert exc_info.value.value == "0.9.0"

    def test_token_rank_disagreement(self, linear):
        record = serialize_verified(Verified.check(linear, 10, 1))
        record["rank"] = 2
        with pytest.raises(RecordFormatError):
            load_verified(record, type(linear))

    def test_missing_key(self, linear):
        record = serialize_verified(Verified.check(linear, 10, 1))
        del record["inner"]
        with pytest.raises(KeyError):
            load_verified(record, type(linear))


class TestVerifiedLoader:
    def test_file_round_trip(self, convex, tmp_path):
        original = Verified.check(convex, 10.0, 1.0)
        path = VerifiedSerializer().dump(original, tmp_path / "convex.json")
        restored = VerifiedLoader(type(convex)).load(path)
        assert restored == original
        assert restored.still_holds(10.0, 1.0)

    def test_loads_text(self, linear):
        text = VerifiedSerializer().dumps(Verified.check(linear, 10, 1))
        assert VerifiedLoader(type(linear)).loads(text).is_robust()
