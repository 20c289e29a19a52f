"""Tests for pointer hit-testing."""
import pytest

from dialview.model.hit_test import PointerPhase, is_hit


class TestPointerPhase:
    def test_coerce_names(self):
        assert PointerPhase.coerce("release") is PointerPhase.RELEASE
        assert PointerPhase.coerce("PRESS") is PointerPhase.PRESS
        assert PointerPhase.coerce(PointerPhase.MOVE) is PointerPhase.MOVE

    @pytest.mark.parametrize("value", ["tap", "", None, 3])
    def test_coerce_unknown(self, value):
        assert PointerPhase.coerce(value) is None


class TestIsHit:
    def test_release_at_center(self):
        assert is_hit(500, 400, PointerPhase.RELEASE, 500, 400, 320) is True

    def test_release_outside(self):
        assert is_hit(500, 400 + 330, PointerPhase.RELEASE, 500, 400, 320) is False

    def test_boundary_counts_as_inside(self):
        assert is_hit(500, 400 + 320, PointerPhase.RELEASE, 500, 400, 320) is True
        assert is_hit(500 + 3, 400 + 4, "release", 500, 400, 5) is True

    @pytest.mark.parametrize("phase", [PointerPhase.PRESS, PointerPhase.MOVE, PointerPhase.CANCEL, "bogus", None])
    def test_other_phases_never_hit(self, phase):
        assert is_hit(500, 400, phase, 500, 400, 320) is False

    def test_zero_radius(self):
        assert is_hit(10, 10, "release", 10, 10, 0.0) is True
        assert is_hit(10, 11, "release", 10, 10, 0.0) is False
