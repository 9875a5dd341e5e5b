"""Transient per-frame state: praise star bursts and the eased cursor trail."""

from __future__ import annotations

import logging
import math
import random

from quiz_canvas.constants.animation_constants import (
    BURST_CADENCE_FRAMES,
    BURST_SIZE,
    BURST_SPEED_RANGE,
    CURSOR_EASING,
    PARTICLE_DECAY,
    PARTICLE_FRICTION,
    PARTICLE_LIFESPAN,
    TRAIL_LENGTH,
)
from quiz_canvas.core.animations import lerp
from quiz_canvas.core.models import CursorState, Particle, TrailPoint

logger = logging.getLogger(__name__)


class ParticleSystem:
    """Pool of star particles, advanced and filtered once per tick."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self._particles: list[Particle] = []

    def __len__(self) -> int:
        return len(self._particles)

    @property
    def particles(self) -> list[Particle]:
        return list(self._particles)

    def set_seed(self, seed: int | None) -> None:
        self._rng.seed(seed)

    def spawn_burst(self, x: float, y: float, count: int = BURST_SIZE) -> None:
        low, high = BURST_SPEED_RANGE
        for _ in range(count):
            angle = self._rng.uniform(0.0, 2 * math.pi)
            speed = self._rng.uniform(low, high)
            self._particles.append(
                Particle(
                    x=x,
                    y=y,
                    vx=math.cos(angle) * speed,
                    vy=math.sin(angle) * speed,
                    hue=self._rng.uniform(0.0, 360.0),
                    remaining_life=PARTICLE_LIFESPAN,
                )
            )

    def update(self) -> None:
        """Move every particle one tick and drop the expired ones."""
        for particle in self._particles:
            particle.x += particle.vx
            particle.y += particle.vy
            particle.vx *= PARTICLE_FRICTION
            particle.vy *= PARTICLE_FRICTION
            particle.remaining_life -= PARTICLE_DECAY
        self._particles = [p for p in self._particles if not p.is_finished()]

    def step_praise(self, frame_count: int, origin_x: float, origin_y: float) -> None:
        """Emit a burst on the spawn cadence, then advance all particles."""
        if frame_count % BURST_CADENCE_FRAMES == 0:
            self.spawn_burst(origin_x, origin_y)
        self.update()

    def clear(self) -> None:
        if self._particles:
            logger.debug("Clearing %d particle(s)", len(self._particles))
        self._particles = []


class CursorTrail:
    """Custom cursor that eases towards the pointer and leaves a short trail."""

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self._state = CursorState(x=x, y=y)

    @property
    def position(self) -> tuple[float, float]:
        return self._state.x, self._state.y

    @property
    def trail(self) -> list[TrailPoint]:
        return list(self._state.trail)

    def step(self, pointer_x: float, pointer_y: float) -> None:
        state = self._state
        state.x = lerp(state.x, pointer_x, CURSOR_EASING)
        state.y = lerp(state.y, pointer_y, CURSOR_EASING)
        state.trail.append(TrailPoint(state.x, state.y))
        if len(state.trail) > TRAIL_LENGTH:
            del state.trail[0]
