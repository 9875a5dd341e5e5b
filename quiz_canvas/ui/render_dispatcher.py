"""Per-frame painting of the quiz screens onto a QPainter."""

from __future__ import annotations

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QFontMetricsF, QPainter, QPen, QPolygonF, QTextOption

from quiz_canvas.constants.animation_constants import RIPPLE_STROKE_WIDTH
from quiz_canvas.constants.layout_constants import OPTION_TEXT_PADDING
from quiz_canvas.constants.ui_constants import (
    FEEDBACK_CONTINUE_HINT,
    FEEDBACK_CORRECT_TITLE,
    FEEDBACK_WRONG_TITLE,
    RESULT_CAPTION_FONT_SIZE,
    RESULT_LOW_CAPTION,
    RESULT_MID_CAPTION,
    RESULT_SCORE_TEMPLATE,
    RESULT_TITLE,
    RESULT_TOP_CAPTION,
)
from quiz_canvas.core import animations
from quiz_canvas.core.models import LayoutGeometry, ResultTier
from quiz_canvas.core.quiz_controller import QuizController
from quiz_canvas.core.screens import FeedbackScreen, QuestionScreen, ResultScreen, StartScreen
from quiz_canvas.styling import DEFAULT_THEME, ColorPalette, Styles, Theme

_TIER_CAPTIONS = {
    ResultTier.TOP: (RESULT_TOP_CAPTION, ColorPalette.RESULT_TOP),
    ResultTier.MID: (RESULT_MID_CAPTION, ColorPalette.RESULT_MID),
    ResultTier.LOW: (RESULT_LOW_CAPTION, ColorPalette.RESULT_LOW),
}


def _color(hex_value: str, alpha: float = 1.0) -> QColor:
    color = QColor(hex_value)
    color.setAlphaF(max(0.0, min(1.0, alpha)))
    return color


def _hue_color(hue: float, saturation: float, value: float, alpha: float = 1.0) -> QColor:
    return QColor.fromHsvF((hue % 360.0) / 360.0, saturation, value, max(0.0, min(1.0, alpha)))


def _polygon(points: tuple[tuple[float, float], ...]) -> QPolygonF:
    return QPolygonF([QPointF(x, y) for x, y in points])


class RenderDispatcher:
    """Draws exactly one screen per frame, chosen by the controller's current screen.

    The dispatcher only reads from the controller; particles are stepped in
    ``QuizController.advance_frame`` so repainting never changes quiz state.
    """

    def __init__(self, theme: Theme = DEFAULT_THEME) -> None:
        self._theme = theme
        self._handlers = {
            StartScreen: self._draw_start,
            QuestionScreen: self._draw_question,
            FeedbackScreen: self._draw_feedback,
            ResultScreen: self._draw_result,
        }

    def render(self, painter: QPainter, controller: QuizController) -> None:
        geometry = controller.geometry
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(
            QRectF(0, 0, geometry.viewport_width, geometry.viewport_height),
            _color(ColorPalette.BACKGROUND.get(self._theme)),
        )
        self._draw_cursor(painter, controller)

        screen = controller.current_screen()
        self._handlers[type(screen)](painter, screen, controller)

    # --- Screens ---

    def _draw_start(self, painter: QPainter, screen: StartScreen, controller: QuizController) -> None:
        geometry = controller.geometry
        width, height = geometry.viewport_width, geometry.viewport_height
        self._draw_centered_text(
            painter, screen.title, width / 2, height / 3, geometry.title_size, ColorPalette.TEXT_PRIMARY
        )
        self._draw_centered_text(
            painter, screen.subtitle, width / 2, height / 2, geometry.subtitle_size, ColorPalette.START_HINT
        )

    def _draw_question(self, painter: QPainter, screen: QuestionScreen, controller: QuizController) -> None:
        geometry = screen.geometry
        qx, qy = geometry.question_origin
        painter.setPen(_color(ColorPalette.TEXT_PRIMARY.get(self._theme)))
        painter.setFont(Styles.canvas_font(geometry.question_size))
        painter.drawText(
            QRectF(qx, qy, geometry.viewport_width - geometry.margin * 2, geometry.options_top - qy),
            screen.question.question_text,
            self._text_option(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop),
        )

        for index, (rect, option) in enumerate(zip(geometry.option_rects, screen.question.options)):
            self._draw_option(painter, geometry, index, rect, option, hovered=index == screen.hovered_option)

    def _draw_option(self, painter, geometry: LayoutGeometry, index: int, rect, option: str, hovered: bool) -> None:
        background = ColorPalette.OPTION_HOVER_BG if hovered else ColorPalette.OPTION_BG
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(_color(background.get(self._theme))))
        painter.drawRoundedRect(
            QRectF(rect.x, rect.y, rect.w, rect.h), geometry.button_corner, geometry.button_corner
        )

        padding = OPTION_TEXT_PADDING * geometry.scale
        painter.setPen(_color(ColorPalette.TEXT_PRIMARY.get(self._theme)))
        painter.setFont(Styles.canvas_font(geometry.option_text_size))
        label = f"{chr(ord('A') + index)}. {option}"
        painter.drawText(
            QRectF(rect.x + padding, rect.y, max(0.0, rect.w - padding * 2), rect.h),
            label,
            self._text_option(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter),
        )

    def _draw_feedback(self, painter: QPainter, screen: FeedbackScreen, controller: QuizController) -> None:
        geometry = controller.geometry
        width, height = geometry.viewport_width, geometry.viewport_height

        if screen.correct:
            self._draw_particles(painter, controller)
            self._draw_centered_text(
                painter,
                FEEDBACK_CORRECT_TITLE,
                width / 2,
                height / 2 - geometry.margin,
                geometry.title_size,
                ColorPalette.SUCCESS,
            )
        else:
            heart = animations.heart_polygon(controller.frame_count, width / 2, height / 2)
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QBrush(_color(ColorPalette.HEART.get(self._theme), 0.7)))
            painter.drawPolygon(_polygon(heart))
            self._draw_centered_text(
                painter,
                FEEDBACK_WRONG_TITLE,
                width / 2,
                height / 2 - geometry.margin,
                geometry.title_size,
                ColorPalette.ERROR,
            )
            self._draw_centered_text(
                painter,
                screen.message,
                width / 2,
                height / 2 + geometry.margin / 2,
                geometry.option_text_size,
                ColorPalette.TEXT_PRIMARY,
            )

        self._draw_centered_text(
            painter,
            FEEDBACK_CONTINUE_HINT,
            width / 2,
            height - geometry.margin,
            geometry.subtitle_size,
            ColorPalette.CONTINUE_HINT,
        )

    def _draw_result(self, painter: QPainter, screen: ResultScreen, controller: QuizController) -> None:
        geometry = controller.geometry
        width, height = geometry.viewport_width, geometry.viewport_height
        self._draw_centered_text(
            painter, RESULT_TITLE, width / 2, height / 4, geometry.title_size, ColorPalette.TEXT_PRIMARY
        )
        self._draw_centered_text(
            painter,
            RESULT_SCORE_TEMPLATE.format(score=screen.score, total=screen.total),
            width / 2,
            height / 2 - geometry.margin,
            geometry.question_size,
            ColorPalette.TEXT_PRIMARY,
        )
        self._draw_tier_animation(painter, screen.tier, controller)

    def _draw_tier_animation(self, painter: QPainter, tier: ResultTier, controller: QuizController) -> None:
        geometry = controller.geometry
        width, height = geometry.viewport_width, geometry.viewport_height
        frame = controller.frame_count

        caption, caption_color = _TIER_CAPTIONS[tier]
        caption_size = min(RESULT_CAPTION_FONT_SIZE, max(geometry.subtitle_size, width / 20))
        self._draw_centered_text(painter, caption, width / 2, height / 2 + 50, caption_size, caption_color)

        if tier == ResultTier.TOP:
            self._draw_particles(painter, controller)
        elif tier == ResultTier.MID:
            painter.setPen(Qt.PenStyle.NoPen)
            for bubble in animations.rising_bubbles(frame, width, height):
                painter.setBrush(QBrush(_color(ColorPalette.BUBBLE.get(self._theme), bubble.alpha)))
                painter.drawEllipse(QPointF(bubble.x, bubble.y), bubble.diameter / 2, bubble.diameter / 2)
        else:
            pen = QPen(_color(ColorPalette.RESULT_LOW.get(self._theme), 0.3))
            pen.setWidthF(RIPPLE_STROKE_WIDTH)
            painter.setPen(pen)
            painter.setBrush(Qt.BrushStyle.NoBrush)
            for ripple in animations.ripples(frame, width, height):
                painter.drawEllipse(QPointF(ripple.x, ripple.y), ripple.diameter / 2, ripple.diameter / 2)

    # --- Shared pieces ---

    def _draw_particles(self, painter: QPainter, controller: QuizController) -> None:
        painter.setPen(Qt.PenStyle.NoPen)
        for star in animations.particle_stars(controller.particles.particles, controller.frame_count):
            painter.setBrush(QBrush(_hue_color(star.hue, 1.0, 1.0, star.alpha)))
            painter.drawPolygon(_polygon(star.points))

    def _draw_cursor(self, painter: QPainter, controller: QuizController) -> None:
        painter.setPen(Qt.PenStyle.NoPen)
        for dot in animations.trail_dots(controller.cursor.trail):
            painter.setBrush(QBrush(_hue_color(dot.hue, 0.8, 1.0, dot.alpha)))
            painter.drawEllipse(QPointF(dot.x, dot.y), dot.diameter / 2, dot.diameter / 2)
        head = animations.cursor_head(*controller.cursor.position)
        painter.setBrush(QBrush(_hue_color(head.hue, 1.0, 1.0)))
        painter.drawEllipse(QPointF(head.x, head.y), head.diameter / 2, head.diameter / 2)

    def _draw_centered_text(self, painter: QPainter, text: str, cx: float, baseline: float, size: float, color) -> None:
        font = Styles.canvas_font(size)
        painter.setFont(font)
        painter.setPen(_color(color.get(self._theme)))
        advance = QFontMetricsF(font).horizontalAdvance(text)
        painter.drawText(QPointF(cx - advance / 2, baseline), text)

    @staticmethod
    def _text_option(alignment) -> QTextOption:
        option = QTextOption(alignment)
        option.setWrapMode(QTextOption.WrapMode.WordWrap)
        return option
