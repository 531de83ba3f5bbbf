"""Tests for the spring model."""

import math

import pytest

from mgg.motion.spring import CRITICALLY_DAMPED, SpringConfig, spring


def _closed_form_critical(frame: int, fps: int, omega: float) -> float:
    t = frame / fps
    return 1.0 - math.exp(-omega * t) * (1.0 + omega * t)


class TestSpringBoundary:
    @pytest.mark.parametrize("config", [
        SpringConfig(),
        CRITICALLY_DAMPED,
        SpringConfig(stiffness=200, damping=15),
        SpringConfig(stiffness=150),
    ])
    def test_zero_elapsed_is_exactly_zero(self, config):
        assert spring(0, 30, config) == 0.0

    def test_negative_elapsed_is_zero(self):
        assert spring(-12, 30, CRITICALLY_DAMPED) == 0.0

    def test_invalid_fps_raises(self):
        with pytest.raises(ValueError):
            spring(5, 0)


class TestSpringDynamics:
    def test_critically_damped_matches_closed_form(self):
        for frame in (1, 5, 15, 30):
            assert spring(frame, 30, CRITICALLY_DAMPED) == pytest.approx(
                _closed_form_critical(frame, 30, 10.0), rel=1e-9
            )

    def test_under_damped_matches_closed_form(self):
        cfg = SpringConfig()  # stiffness 100, damping 10: zeta 0.5
        zeta, omega = 0.5, 10.0
        omega_d = omega * math.sqrt(1 - zeta**2)
        t = 12 / 30
        expected = 1.0 - math.exp(-zeta * omega * t) * (
            math.cos(omega_d * t) + zeta * omega / omega_d * math.sin(omega_d * t)
        )
        assert spring(12, 30, cfg) == pytest.approx(expected, rel=1e-9)

    @pytest.mark.parametrize("config", [
        CRITICALLY_DAMPED,
        SpringConfig.from_damping_ratio(1.0),
        SpringConfig.from_damping_ratio(3.0, stiffness=80),
    ])
    def test_damped_springs_never_decrease(self, config):
        values = [spring(frame, 30, config) for frame in range(0, 60)]
        assert all(b >= a for a, b in zip(values, values[1:]))
        assert max(values) <= 1.0

    def test_over_damped_ratio_behaves_as_critical(self):
        over = SpringConfig.from_damping_ratio(3.0)
        critical = SpringConfig.from_damping_ratio(1.0)
        for frame in (1, 5, 15, 30):
            assert spring(frame, 30, over) == pytest.approx(spring(frame, 30, critical), rel=1e-12)

    def test_under_damped_overshoots_then_settles(self):
        cfg = SpringConfig(stiffness=200, damping=15)
        values = [spring(frame, 30, cfg) for frame in range(0, 60)]
        assert max(values) > 1.0
        assert spring(300, 30, cfg) == pytest.approx(1.0, abs=1e-6)

    def test_overshoot_clamping(self):
        cfg = SpringConfig(stiffness=200, damping=15, overshoot_clamping=True)
        assert max(spring(frame, 30, cfg) for frame in range(0, 60)) == 1.0

    def test_fractional_frames_lie_between_neighbours(self):
        lower = spring(10, 30, CRITICALLY_DAMPED)
        upper = spring(11, 30, CRITICALLY_DAMPED)
        assert lower < spring(10.5, 30, CRITICALLY_DAMPED) < upper


class TestSpringDeterminism:
    def test_call_order_does_not_matter(self):
        cfg = SpringConfig(stiffness=200, damping=15)
        first = spring(42, 30, cfg)
        for frame in (100, 3, 77, 42, 0):
            spring(frame, 30, cfg)
        assert spring(42, 30, cfg) == first


class TestSpringConfig:
    def test_damping_ratio_round_trip(self):
        cfg = SpringConfig.from_damping_ratio(0.25, stiffness=64, mass=2)
        assert cfg.damping_ratio == pytest.approx(0.25)
        assert cfg.natural_frequency == pytest.approx(math.sqrt(32))

    def test_rejects_non_positive_stiffness(self):
        with pytest.raises(ValueError):
            SpringConfig(stiffness=0)
