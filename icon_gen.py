"""Generate the system-tray icon (64×64 PIL Image, in-memory) from a month grid."""

from typing import Sequence

from PIL import Image, ImageDraw

from calendar_logic import WeekRow

ICON_SIZE = 64
ENABLED_FILL = "#333333"
DISABLED_FILL = "#C8C8C8"


def create_icon_image(rows: Sequence[WeekRow], size: int = ICON_SIZE) -> Image.Image:
    """Return a square RGBA image with one block per visible day.

    Enabled days are dark, disabled days light grey.  The first category
    colour of a day, if any, fills the lower half of its block.
    """
    img = Image.new("RGBA", (size, size), "white")
    if not rows:
        return img
    draw = ImageDraw.Draw(img)

    cols = max(len(row) for row in rows)
    pitch = size // max(cols, len(rows))
    gap = 1 if pitch > 3 else 0
    # Centre the grid
    x0 = (size - pitch * cols) // 2
    y0 = (size - pitch * len(rows)) // 2

    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            x1 = x0 + c * pitch
            y1 = y0 + r * pitch
            x2 = x1 + pitch - 1 - gap
            y2 = y1 + pitch - 1 - gap
            draw.rectangle((x1, y1, x2, y2),
                           fill=ENABLED_FILL if cell.is_enabled else DISABLED_FILL)
            if cell.category_colors:
                mid = y1 + (y2 - y1) // 2
                draw.rectangle((x1, mid, x2, y2), fill=cell.category_colors[0])
    return img
