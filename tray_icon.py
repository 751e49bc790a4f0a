"""System-tray icon setup via pystray."""

from typing import Callable

import pystray
from PIL import Image
from pystray import MenuItem, Menu


def create_tray(
    icon_image: Image.Image,
    title: str,
    on_show: Callable[[], None],
    on_exit: Callable[[], None],
    on_prev: Callable[[], None] | None = None,
    on_next: Callable[[], None] | None = None,
) -> pystray.Icon:
    """Build and return a pystray Icon (not yet started)."""
    items: list[MenuItem | Menu] = [
        MenuItem("Show Calendar", lambda _icon, _item: on_show(), default=True),
    ]
    if on_prev is not None:
        items.append(MenuItem("Previous Month", lambda _icon, _item: on_prev()))
    if on_next is not None:
        items.append(MenuItem("Next Month", lambda _icon, _item: on_next()))
    items.append(Menu.SEPARATOR)
    items.append(MenuItem("Exit", lambda _icon, _item: on_exit()))
    return pystray.Icon("month-grid-calendar", icon_image, title, Menu(*items))
