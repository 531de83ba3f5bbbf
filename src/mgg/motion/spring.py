"""Deterministic spring physics for entrance and pop-in animation.

``spring`` models a damped harmonic oscillator released from rest at 0 and
pulled toward 1. The state is advanced one frame at a time using the exact
closed-form solution of the under-damped oscillator when the damping ratio is
below 1. Any ratio of 1 or more is treated as critically damped at the
natural frequency, so over-damped configs settle exactly like critical ones.
The whole integration is replayed from frame 0 on every call. Nothing is
cached between calls, so the result depends only on the arguments, whatever
order frames are requested in.
"""

import math
from dataclasses import dataclass
from typing import Tuple

# Longest physical step taken in one frame, in seconds.
MAX_STEP_SECONDS = 0.064


@dataclass(frozen=True)
class SpringConfig:
    """Physical parameters of a spring."""

    stiffness: float = 100.0
    damping: float = 10.0
    mass: float = 1.0
    overshoot_clamping: bool = False

    def __post_init__(self) -> None:
        if self.stiffness <= 0 or self.mass <= 0:
            raise ValueError("Spring stiffness and mass must be positive")
        if self.damping < 0:
            raise ValueError("Spring damping must not be negative")

    @classmethod
    def from_damping_ratio(
        cls, damping_ratio: float, stiffness: float = 100.0, mass: float = 1.0
    ) -> "SpringConfig":
        """Build a spring from a damping ratio instead of a damping coefficient.

        A ratio below 1 is under-damped. Ratios of 1 and above all behave as
        critically damped.
        """
        damping = damping_ratio * 2.0 * math.sqrt(stiffness * mass)
        return cls(stiffness=stiffness, damping=damping, mass=mass)

    @property
    def damping_ratio(self) -> float:
        """Return zeta, the dimensionless damping ratio."""
        return self.damping / (2.0 * math.sqrt(self.stiffness * self.mass))

    @property
    def natural_frequency(self) -> float:
        """Return omega0 in radians per second."""
        return math.sqrt(self.stiffness / self.mass)


# Rises smoothly to 1 with no overshoot.
CRITICALLY_DAMPED = SpringConfig(damping=200.0)


def _step(displacement: float, velocity: float, dt: float, cfg: SpringConfig) -> Tuple[float, float]:
    """Advance displacement from the target and velocity by ``dt`` seconds."""
    omega = cfg.natural_frequency
    zeta = cfg.damping_ratio
    d0, v0 = displacement, velocity

    if zeta < 1.0:
        omega_d = omega * math.sqrt(1.0 - zeta * zeta)
        envelope = math.exp(-zeta * omega * dt)
        cos_t = math.cos(omega_d * dt)
        sin_t = math.sin(omega_d * dt)
        d = envelope * (d0 * cos_t + (v0 + zeta * omega * d0) / omega_d * sin_t)
        v = envelope * (v0 * cos_t - (zeta * omega * v0 + omega * omega * d0) / omega_d * sin_t)
        return d, v

    # Critically and over-damped springs share the critical solution at omega0.
    envelope = math.exp(-omega * dt)
    d = envelope * (d0 + (v0 + omega * d0) * dt)
    v = envelope * (v0 - omega * (v0 + omega * d0) * dt)
    return d, v


def spring(elapsed_frames: float, fps: int, config: SpringConfig = SpringConfig()) -> float:
    """Return spring progress after ``elapsed_frames`` frames.

    Args:
        elapsed_frames: Frames since the spring was released. Values at or
            below zero give exactly 0.
        fps: Frame rate used to convert frames into physical time.
        config: Spring parameters.

    Returns:
        Progress toward 1. Under-damped springs may briefly exceed 1 unless
        ``overshoot_clamping`` is set.
    """
    if fps <= 0:
        raise ValueError(f"fps must be positive, got {fps}")
    if elapsed_frames <= 0:
        return 0.0

    whole = int(math.floor(elapsed_frames))
    remainder = elapsed_frames - whole
    dt = min(1.0 / fps, MAX_STEP_SECONDS)

    displacement, velocity = -1.0, 0.0
    for _ in range(whole):
        displacement, velocity = _step(displacement, velocity, dt, config)
    if remainder:
        displacement, velocity = _step(displacement, velocity, remainder * dt, config)

    progress = 1.0 + displacement
    if config.overshoot_clamping and progress > 1.0:
        return 1.0
    return progress
