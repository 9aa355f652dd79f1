"""System-tray icon setup via pystray."""

from typing import Callable

import pystray
from PIL import Image
from pystray import MenuItem, Menu

from date_value import DateValue


def create_tray(
    icon_image: Image.Image,
    today: DateValue,
    on_show: Callable[[], None],
    on_exit: Callable[[], None],
    on_today: Callable[[], None] | None = None,
) -> pystray.Icon:
    """Build and return a pystray Icon (not yet started)."""
    items: list[MenuItem | Menu] = [
        MenuItem("Show Date Picker", lambda _icon, _item: on_show(), default=True),
    ]
    if on_today is not None:
        items.append(MenuItem("Select Today", lambda _icon, _item: on_today()))
    items.append(Menu.SEPARATOR)
    items.append(MenuItem("Exit", lambda _icon, _item: on_exit()))
    menu = Menu(*items)
    return pystray.Icon("jalali-picker", icon_image, f"Jalali Date Picker – {today}", menu)
