"""Entry point — glues pystray (daemon thread) with tkinter (main thread)."""

import threading

from calendar_window import CalendarWindow
from icon_gen import create_icon_image
from logger import configure_logging, get_logger
from settings import load_settings
from tray_icon import create_tray

logger = get_logger(__name__)


def main() -> None:
    configure_logging(load_settings()["log_level"])
    cal_win = CalendarWindow()
    controller = cal_win.controller

    def refresh_icon() -> None:
        tray.icon = create_icon_image(controller.rows)
        tray.title = f"Month Calendar – {controller.year}-{controller.month:02d}"

    # Callbacks marshalled onto the tkinter main thread
    def on_show() -> None:
        cal_win.root.after(0, cal_win.toggle)

    def on_exit() -> None:
        def _quit() -> None:
            tray.stop()
            cal_win.hide()
            cal_win.root.destroy()
        cal_win.root.after(0, _quit)

    def on_prev() -> None:
        cal_win.root.after(0, cal_win.navigate, -1)

    def on_next() -> None:
        cal_win.root.after(0, cal_win.navigate, 1)

    tray = create_tray(
        create_icon_image(controller.rows),
        f"Month Calendar – {controller.year}-{controller.month:02d}",
        on_show, on_exit, on_prev=on_prev, on_next=on_next,
    )

    # Window buttons and tray menu both end up here
    cal_win.on_month_change = refresh_icon

    # Run pystray in a daemon thread so it doesn't block tkinter
    tray_thread = threading.Thread(target=tray.run, daemon=True)
    tray_thread.start()

    logger.info("Calendar started for %d-%02d", controller.year, controller.month)
    cal_win.show()
    cal_win.root.mainloop()


if __name__ == "__main__":
    main()
