"""Stateless shape generators for the decorative animations.

Nothing here keeps state between frames: every function derives its shapes
from the frame counter and the viewport, so painting can call them freely.
"""

from __future__ import annotations

from dataclasses import dataclass
import math

from quiz_canvas.constants.animation_constants import (
    BUBBLE_COUNT,
    BUBBLE_PULSE_SPEED,
    BUBBLE_RADIUS_RANGE,
    BUBBLE_RISE_PER_FRAME,
    BUBBLE_SPACING,
    BUBBLE_WRAP_PADDING,
    CURSOR_HEAD_DIAMETER,
    HEART_PULSE_SPEED,
    HEART_SIZE_DIVISOR,
    HEART_SIZE_RANGE,
    HEART_STEP,
    RIPPLE_COUNT,
    RIPPLE_MIN_DIAMETER,
    RIPPLE_SPEED,
    STAR_INNER_RATIO,
    STAR_OUTER_RADIUS,
    STAR_POINTS,
    STAR_SPIN_PER_FRAME,
    TRAIL_ALPHA_RANGE,
    TRAIL_DIAMETER_RANGE,
    TRAIL_HUE_RANGE,
    TRAIL_LENGTH,
    TWO_PI,
)
from quiz_canvas.core.models import Particle, TrailPoint


@dataclass(frozen=True, slots=True)
class Circle:
    """A filled or stroked circle; ``alpha`` is 0..1 and ``hue`` is in degrees."""

    x: float
    y: float
    diameter: float
    alpha: float = 1.0
    hue: float = 0.0


@dataclass(frozen=True, slots=True)
class StarShape:
    points: tuple[tuple[float, float], ...]
    hue: float
    alpha: float


def map_range(value: float, start1: float, stop1: float, start2: float, stop2: float) -> float:
    """Linearly re-map ``value`` from one range onto another (no clamping)."""
    if stop1 == start1:
        return start2
    return start2 + (stop2 - start2) * ((value - start1) / (stop1 - start1))


def lerp(start: float, stop: float, amount: float) -> float:
    return start + (stop - start) * amount


def _hash2(ix: int, iy: int) -> float:
    n = ix * 15731 + iy * 789221
    n = (n << 13) ^ n
    raw = (1.0 - ((n * (n * n * 15731 + 789221) + 1376312589) & 0x7FFFFFFF) / 1073741824.0) * 0.5 + 0.5
    return min(1.0, max(0.0, raw))


def value_noise(x: float, y: float) -> float:
    """Smooth 2D value noise in [0, 1]."""
    xi = math.floor(x)
    yi = math.floor(y)
    u = x - xi
    v = y - yi
    u = u * u * (3.0 - 2.0 * u)
    v = v * v * (3.0 - 2.0 * v)

    top = lerp(_hash2(xi, yi), _hash2(xi + 1, yi), u)
    bottom = lerp(_hash2(xi, yi + 1), _hash2(xi + 1, yi + 1), u)
    return lerp(top, bottom, v)


def star_points(
    cx: float,
    cy: float,
    inner_radius: float,
    outer_radius: float,
    point_count: int = STAR_POINTS,
    rotation: float = 0.0,
) -> tuple[tuple[float, float], ...]:
    """Vertices of a star polygon, alternating outer and inner radius."""
    angle = TWO_PI / point_count
    half_angle = angle / 2.0
    vertices: list[tuple[float, float]] = []
    for step in range(point_count):
        a = rotation + step * angle
        vertices.append((cx + math.cos(a) * outer_radius, cy + math.sin(a) * outer_radius))
        vertices.append(
            (cx + math.cos(a + half_angle) * inner_radius, cy + math.sin(a + half_angle) * inner_radius)
        )
    return tuple(vertices)


def particle_stars(particles: list[Particle], frame_count: int) -> list[StarShape]:
    """Star outlines for live particles, spinning with the frame count and fading with life."""
    rotation = frame_count * STAR_SPIN_PER_FRAME
    return [
        StarShape(
            points=star_points(
                particle.x,
                particle.y,
                STAR_OUTER_RADIUS * STAR_INNER_RATIO,
                STAR_OUTER_RADIUS,
                rotation=rotation,
            ),
            hue=particle.hue,
            alpha=max(0.0, particle.remaining_life / 255),
        )
        for particle in particles
    ]


def heart_polygon(frame_count: int, cx: float, cy: float) -> tuple[tuple[float, float], ...]:
    """Pulsing heart built from the parametric heart curve, centred on ``(cx, cy)``."""
    low, high = HEART_SIZE_RANGE
    size = map_range(math.sin(frame_count * HEART_PULSE_SPEED), -1, 1, low, high)
    vertices: list[tuple[float, float]] = []
    t = 0.0
    while t < TWO_PI:
        x = size * 16 * math.sin(t) ** 3
        y = -size * (13 * math.cos(t) - 5 * math.cos(2 * t) - 2 * math.cos(3 * t) - math.cos(4 * t))
        vertices.append((cx + x / HEART_SIZE_DIVISOR, cy + y / HEART_SIZE_DIVISOR))
        t += HEART_STEP
    return tuple(vertices)


def rising_bubbles(frame_count: int, width: float, height: float) -> list[Circle]:
    """Bubbles drifting upwards and wrapping around over ``height + 200``."""
    low, high = BUBBLE_RADIUS_RANGE
    wrap = height + BUBBLE_WRAP_PADDING
    bubbles: list[Circle] = []
    for index in range(BUBBLE_COUNT):
        x = value_noise(index * 0.1, frame_count * 0.01) * width
        y = (frame_count * BUBBLE_RISE_PER_FRAME + index * BUBBLE_SPACING) % wrap - BUBBLE_WRAP_PADDING / 2
        diameter = map_range(math.sin(frame_count * BUBBLE_PULSE_SPEED + index), -1, 1, low, high)
        alpha = 0.5 - (y / height) * 0.5 if height else 0.5
        bubbles.append(Circle(x=x, y=y, diameter=diameter, alpha=min(1.0, max(0.0, alpha))))
    return bubbles


def ripples(frame_count: int, width: float, height: float) -> list[Circle]:
    """Concentric circles breathing between a small diameter and the viewport width."""
    return [
        Circle(
            x=width / 2,
            y=height / 2,
            diameter=map_range(math.sin(frame_count * RIPPLE_SPEED + index), -1, 1, RIPPLE_MIN_DIAMETER, width),
            alpha=0.3,
        )
        for index in range(RIPPLE_COUNT)
    ]


def trail_dots(trail: list[TrailPoint]) -> list[Circle]:
    """Trail dots grow and brighten towards the newest point."""
    last = TRAIL_LENGTH - 1
    return [
        Circle(
            x=point.x,
            y=point.y,
            diameter=map_range(index, 0, last, *TRAIL_DIAMETER_RANGE),
            alpha=map_range(index, 0, last, *TRAIL_ALPHA_RANGE),
            hue=map_range(index, 0, last, *TRAIL_HUE_RANGE),
        )
        for index, point in enumerate(trail)
    ]


def cursor_head(x: float, y: float) -> Circle:
    return Circle(x=x, y=y, diameter=CURSOR_HEAD_DIAMETER, hue=60.0)
