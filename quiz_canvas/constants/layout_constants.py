"""Design-space constants for the responsive canvas layout.

Every size is given as ``(floor, design_value)``: the design value is the size
at the 800x600 base resolution and is multiplied by the current scale, the
floor keeps the UI legible on small windows.
"""

BASE_DESIGN_WIDTH: int = 800
BASE_DESIGN_HEIGHT: int = 600

MARGIN: tuple[float, float] = (16, 50)
GAP: tuple[float, float] = (8, 24)
TITLE_SIZE: tuple[float, float] = (18, 40)
SUBTITLE_SIZE: tuple[float, float] = (12, 24)
QUESTION_SIZE: tuple[float, float] = (14, 24)
OPTION_TEXT_SIZE: tuple[float, float] = (12, 20)
BUTTON_HEIGHT: tuple[float, float] = (36, 50)
BUTTON_CORNER: tuple[float, float] = (4, 8)

# Widths strictly above this use two columns; everything else shares one column.
TWO_COLUMN_MIN_WIDTH: int = 1000
QUESTION_TOP_FACTOR: float = 1.2
QUESTION_BLOCK_LINES: int = 3
OPTION_TEXT_PADDING: float = 15
OPTION_COUNT: int = 4
