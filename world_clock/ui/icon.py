"""
Clock icon for the tray and the window.

The icon is drawn with Pillow at runtime so the widget ships without binary
assets. Run this module directly to also write it out as clock_icon.png.
"""

from PIL import Image, ImageDraw
from PIL.ImageQt import toqpixmap
from PyQt6.QtGui import QIcon

ICON_SIZE = 16


def draw_clock_image(size: int = ICON_SIZE) -> Image.Image:
    """Draw a black clock face with white hour and minute hands."""
    scale = size / ICON_SIZE
    icon = Image.new("RGBA", (size, size), color=(0, 0, 0, 0))
    draw = ImageDraw.Draw(icon)

    def point(x: float, y: float):
        return (round(x * scale), round(y * scale))

    draw.ellipse([point(1, 1), point(15, 15)], fill=(0, 0, 0, 255))
    width = max(1, round(scale))
    draw.line([point(8, 8), point(8, 3)], fill=(255, 255, 255, 255), width=width)  # hour hand
    draw.line([point(8, 8), point(12, 10)], fill=(255, 255, 255, 255), width=width)  # minute hand
    return icon


def clock_icon() -> QIcon:
    """Build a QIcon from the clock image. Requires a running QApplication."""
    icon = QIcon()
    for size in (16, 32, 64):
        icon.addPixmap(toqpixmap(draw_clock_image(size)))
    return icon


if __name__ == "__main__":
    draw_clock_image(64).save("clock_icon.png")
    print("Icon created successfully!")
