"""Responsive geometry for the quiz canvas.

All sizes are derived from the current viewport by scaling an 800x600 design
and clamping to a floor. The option rectangles produced here are the same ones
used for painting and for hit-testing clicks, so they must be recomputed when
the viewport or the question changes.
"""

from __future__ import annotations

import logging

from quiz_canvas.constants.layout_constants import (
    BASE_DESIGN_HEIGHT,
    BASE_DESIGN_WIDTH,
    BUTTON_CORNER,
    BUTTON_HEIGHT,
    GAP,
    MARGIN,
    OPTION_COUNT,
    OPTION_TEXT_SIZE,
    QUESTION_BLOCK_LINES,
    QUESTION_SIZE,
    QUESTION_TOP_FACTOR,
    SUBTITLE_SIZE,
    TITLE_SIZE,
    TWO_COLUMN_MIN_WIDTH,
)
from quiz_canvas.core.models import LayoutGeometry, Rect

logger = logging.getLogger(__name__)


def _scaled(size: tuple[float, float], scale: float) -> float:
    floor, design_value = size
    return max(floor, design_value * scale)


def column_count(viewport_width: float) -> int:
    """Two columns only on wide viewports; narrow and medium share one column."""
    return 2 if viewport_width > TWO_COLUMN_MIN_WIDTH else 1


def compute_layout(
    viewport_width: float,
    viewport_height: float,
    option_count: int = OPTION_COUNT,
    question_index: int | None = None,
    base_width: float = BASE_DESIGN_WIDTH,
    base_height: float = BASE_DESIGN_HEIGHT,
) -> LayoutGeometry:
    """Compute the full geometry for one viewport size and option count."""
    scale = min(viewport_width / base_width, viewport_height / base_height)
    margin = _scaled(MARGIN, scale)
    gap = _scaled(GAP, scale)
    question_size = _scaled(QUESTION_SIZE, scale)
    button_height = _scaled(BUTTON_HEIGHT, scale)

    question_top = margin * QUESTION_TOP_FACTOR
    options_top = question_top + question_size * QUESTION_BLOCK_LINES
    columns = column_count(viewport_width)

    return LayoutGeometry(
        viewport_width=viewport_width,
        viewport_height=viewport_height,
        scale=scale,
        margin=margin,
        gap=gap,
        title_size=_scaled(TITLE_SIZE, scale),
        subtitle_size=_scaled(SUBTITLE_SIZE, scale),
        question_size=question_size,
        option_text_size=_scaled(OPTION_TEXT_SIZE, scale),
        button_height=button_height,
        button_corner=_scaled(BUTTON_CORNER, scale),
        columns=columns,
        question_origin=(margin, question_top),
        options_top=options_top,
        option_rects=_option_rects(
            viewport_width, option_count, columns, margin, gap, button_height, options_top
        ),
        question_index=question_index,
    )


def _option_rects(
    viewport_width: float,
    option_count: int,
    columns: int,
    margin: float,
    gap: float,
    button_height: float,
    options_top: float,
) -> tuple[Rect, ...]:
    if columns == 2:
        button_width = (viewport_width - margin * 2 - gap) / 2
    else:
        button_width = viewport_width - margin * 2

    rects: list[Rect] = []
    for index in range(option_count):
        row, col = divmod(index, columns)
        rects.append(
            Rect(
                x=margin + col * (button_width + gap),
                y=options_top + row * (button_height + gap),
                w=button_width,
                h=button_height,
            )
        )
    return tuple(rects)


class LayoutEngine:
    """Owns the current LayoutGeometry and keeps it in step with viewport and question."""

    def __init__(self, viewport_width: float, viewport_height: float) -> None:
        self._viewport_width = viewport_width
        self._viewport_height = viewport_height
        self._option_count = OPTION_COUNT
        self._question_index: int | None = None
        self._geometry = self._recompute()

    @property
    def geometry(self) -> LayoutGeometry:
        return self._geometry

    @property
    def viewport_size(self) -> tuple[float, float]:
        return self._viewport_width, self._viewport_height

    def resize(self, viewport_width: float, viewport_height: float) -> LayoutGeometry:
        """Recompute for a new viewport, keeping the current question's option count."""
        self._viewport_width = viewport_width
        self._viewport_height = viewport_height
        self._geometry = self._recompute()
        logger.debug(
            "Layout resized to %sx%s (scale %.3f, %d column(s))",
            viewport_width,
            viewport_height,
            self._geometry.scale,
            self._geometry.columns,
        )
        return self._geometry

    def layout_question(self, question_index: int, option_count: int) -> LayoutGeometry:
        """Recompute option rectangles for the question about to be shown."""
        self._question_index = question_index
        self._option_count = option_count
        self._geometry = self._recompute()
        return self._geometry

    def _recompute(self) -> LayoutGeometry:
        return compute_layout(
            self._viewport_width,
            self._viewport_height,
            option_count=self._option_count,
            question_index=self._question_index,
        )
