"""Generate the system-tray icon (64×64 PIL Image, in-memory)."""

from PIL import Image, ImageDraw, ImageFont

from date_value import DateValue

_DIGITS = str.maketrans("0123456789", "۰۱۲۳۴۵۶۷۸۹")


def create_icon_image(today: DateValue, persian_digits: bool = True) -> Image.Image:
    """Return a 64×64 RGBA image: today's day-of-month on a calendar page."""
    size = 64
    img = Image.new("RGBA", (size, size), "white")
    draw = ImageDraw.Draw(img)

    # Red binding strip across the top of the page
    strip = size // 5
    draw.rectangle((0, 0, size, strip), fill="#E53935")
    text = str(today.day)
    if persian_digits:
        text = text.translate(_DIGITS)

    # Find the largest font size that fits below the strip
    avail_h = size - strip
    font_size = 60
    font = None
    while font_size > 10:
        try:
            font = ImageFont.truetype("DejaVuSans-Bold.ttf", font_size)
        except OSError:
            font = ImageFont.load_default()
            break
        bbox = draw.textbbox((0, 0), text, font=font)
        if bbox[2] - bbox[0] <= size and bbox[3] - bbox[1] <= avail_h:
            break
        font_size -= 1

    # Centre the visible pixels (compensate for font metric offsets)
    bbox = draw.textbbox((0, 0), text, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = strip + (avail_h - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill="black", font=font)

    return img
