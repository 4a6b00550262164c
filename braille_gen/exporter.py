from PIL import Image, ImageDraw, ImageFont
import os

# Monospace fonts with Braille pattern coverage
FONT_CANDIDATES = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",  # Linux
    "DejaVuSansMono.ttf",
    "/System/Library/Fonts/Menlo.ttc",  # macOS
    "Consolas",  # Windows
]


def load_monospace_font(font_size: int = 18):
    for font_path in FONT_CANDIDATES:
        try:
            return ImageFont.truetype(font_path, font_size)
        except (OSError, IOError):
            continue
    return ImageFont.load_default()


def render_text_to_image(text: str, output_path: str, font_size: int = 18, bg_color: str = "white", text_color: str = "black"):
    """
    Renders Braille / ramp text to a PNG image.
    Returns the path to the saved image, or None for empty text.
    """
    lines = text.splitlines()
    if not lines:
        return None

    font = load_monospace_font(font_size)

    # Measure a full cell so Braille and ASCII rows line up
    left, top, right, bottom = font.getbbox("M")
    char_width = max(1, right - left)
    char_height = (bottom - top) + 2

    max_line_len = max(len(line) for line in lines)
    img_width = max_line_len * char_width + 40
    img_height = len(lines) * char_height + 40

    image = Image.new("RGB", (img_width, img_height), color=bg_color)
    draw = ImageDraw.Draw(image)

    y_text = 20
    for line in lines:
        draw.text((20, y_text), line, font=font, fill=text_color)
        y_text += char_height

    output_path = os.path.abspath(output_path)
    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    image.save(output_path)

    return output_path
