"""Tuning values for particles and ambient result animations."""

import math

# Star burst
BURST_CADENCE_FRAMES: int = 5
BURST_SIZE: int = 5
BURST_SPEED_RANGE: tuple[float, float] = (2.0, 6.0)
PARTICLE_FRICTION: float = 0.95
PARTICLE_LIFESPAN: int = 255
PARTICLE_DECAY: int = 5
STAR_OUTER_RADIUS: float = 8.0
STAR_INNER_RATIO: float = 0.4
STAR_POINTS: int = 5
STAR_SPIN_PER_FRAME: float = 0.1

# Heart
HEART_PULSE_SPEED: float = 0.1
HEART_SIZE_RANGE: tuple[float, float] = (150.0, 180.0)
HEART_SIZE_DIVISOR: float = 40.0
HEART_STEP: float = 0.1
TWO_PI: float = 2 * math.pi

# Bubbles
BUBBLE_COUNT: int = 10
BUBBLE_RISE_PER_FRAME: float = 1.5
BUBBLE_SPACING: float = 50.0
BUBBLE_WRAP_PADDING: float = 200.0
BUBBLE_RADIUS_RANGE: tuple[float, float] = (10.0, 25.0)
BUBBLE_PULSE_SPEED: float = 0.05

# Ripples
RIPPLE_COUNT: int = 5
RIPPLE_SPEED: float = 0.02
RIPPLE_MIN_DIAMETER: float = 50.0
RIPPLE_STROKE_WIDTH: float = 5.0

# Cursor trail
TRAIL_LENGTH: int = 15
CURSOR_EASING: float = 0.3
TRAIL_DIAMETER_RANGE: tuple[float, float] = (5.0, 12.0)
TRAIL_ALPHA_RANGE: tuple[float, float] = (0.2, 0.8)
TRAIL_HUE_RANGE: tuple[float, float] = (40.0, 60.0)
CURSOR_HEAD_DIAMETER: float = 8.0
