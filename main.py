"""Entry point: pystray runs in a daemon thread, tkinter on the main thread."""

import sys
import threading
from datetime import date

from date_value import DateValue
from icon_gen import create_icon_image
from logger import setup_logging
from picker_window import PickerWindow
from tray_icon import create_tray


def main() -> None:
    logger = setup_logging()

    def handle_exception(exc_type, exc_value, exc_traceback):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return
        logger.error("Unhandled exception", exc_info=(exc_type, exc_value, exc_traceback))

    sys.excepthook = handle_exception

    window = PickerWindow()
    logger.info("Date picker started (%s calendar)", window.system)

    # Callbacks marshalled onto the tkinter main thread
    def on_show() -> None:
        window.root.after(0, window.show)

    def on_today() -> None:
        window.root.after(0, window.select_today)

    def on_exit() -> None:
        def _quit() -> None:
            tray.stop()
            window.root.destroy()
        window.root.after(0, _quit)

    today = DateValue.from_date(date.today(), window.system)
    tray = create_tray(create_icon_image(today), today, on_show, on_exit, on_today=on_today)

    # Run pystray in a daemon thread so it doesn't block tkinter
    tray_thread = threading.Thread(target=tray.run, daemon=True)
    tray_thread.start()

    window.root.mainloop()
    logger.info("Date picker stopped")


if __name__ == "__main__":
    main()
