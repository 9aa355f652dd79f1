"""Date picker window (tkinter) rendering a DatePickerController."""

from __future__ import annotations

from datetime import date
from tkinter import font as tkfont
import tkinter as tk
from typing import Callable

from calendar_logic import WEEKDAY_ABBR, WEEKDAY_ABBR_EN, GridCell
from date_picker import QUICK_DATES, DatePickerController
from date_value import JALALI, DateValue
from errors import CalendarError, DateDisabled
from iran_holidays import holidays_for_month
from logger import get_logger
from settings import bounds_from_settings, load_settings

logger = get_logger(__name__)

# Colours
ACCENT = "#0078D4"
SEL_BG = "#B3D7F2"
HEADER_BG = "#F3F3F3"
GRID_BG = "white"
DISABLED_FG = "#BBBBBB"
WEEKEND_FG = "#CC0000"

# Arrow key -> day delta; the Jalali grid runs right-to-left
_KEY_DELTAS = {
    JALALI: {"Up": -7, "Down": 7, "Left": 1, "Right": -1},
}
_KEY_DELTAS_LTR = {"Up": -7, "Down": 7, "Left": -1, "Right": 1}

_QUICK_LABELS = {days: label for label, days in QUICK_DATES}


class _GridPanel:
    """Pre-allocated widget pool for one month (header + 6 weeks)."""

    __slots__ = ("frame", "header", "day_headers", "day_cells")

    def __init__(self, parent: tk.Frame, fonts: dict, abbrs: list[str],
                 rtl: bool, on_click) -> None:
        self.frame = tk.Frame(parent, bg=GRID_BG)

        self.header = tk.Label(
            self.frame, font=fonts["header"], bg=HEADER_BG, fg="#333333",
        )
        self.header.grid(row=0, column=0, columnspan=7, sticky="we", pady=(0, 2))

        self.day_headers: list[tk.Label] = []
        for idx, abbr in enumerate(abbrs):
            fg = WEEKEND_FG if idx == 6 else "#333333"
            lbl = tk.Label(
                self.frame, text=abbr, font=fonts["bold"], bg=GRID_BG, fg=fg, width=3,
            )
            lbl.grid(row=1, column=_column(idx, rtl))
            self.day_headers.append(lbl)

        self.day_cells: list[list[tk.Label]] = []
        for r in range(6):
            row_cells: list[tk.Label] = []
            for idx in range(7):
                cell = tk.Label(
                    self.frame, font=fonts["normal"], bg=GRID_BG, width=3,
                )
                cell.grid(row=r + 2, column=_column(idx, rtl))
                cell.bind("<Button-1>", on_click)
                row_cells.append(cell)
            self.day_cells.append(row_cells)


def _column(idx: int, rtl: bool) -> int:
    return 6 - idx if rtl else idx


class PickerWindow:
    """Text field with a drop-down month grid."""

    def __init__(self, today_fn: Callable[[], date] = date.today,
                 settings: dict | None = None) -> None:
        self.root = tk.Tk()
        self.root.title("Date Picker")
        self.root.resizable(False, False)
        self.root.configure(bg=GRID_BG)
        self.root.report_callback_exception = self._report_callback_exception

        self._today_fn = today_fn
        settings = settings or load_settings()
        self.system: str = settings["calendar_system"]
        self._rtl = self.system == JALALI
        self._quick_dates: list[int] = settings["quick_dates"]
        self._enabled_holidays: set[str] = set(settings["holidays"])
        self._holiday_color: str = settings["holiday_color"]

        min_date, max_date = bounds_from_settings(settings)
        self.controller = DatePickerController(
            DateValue.from_date(today_fn(), self.system), self.system,
            min_date=min_date, max_date=max_date,
        )
        self.controller.add_listener(self._on_selection_change)

        # Widget-to-date mapping (filled during _render)
        self._widget_dates: dict[int, DateValue] = {}

        self._setup_fonts()
        self._build_shell()
        self._render()

        for key in ("Up", "Down", "Left", "Right"):
            self.root.bind(f"<{key}>", lambda _e, k=key: self._on_arrow(k))
        self.root.bind("<Return>", self._on_return)
        self.root.bind("<Escape>", lambda _e: self.close())
        self.root.protocol("WM_DELETE_WINDOW", self.root.withdraw)

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Vazirmatn" if "Vazirmatn" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(family=base, size=10)
        self.font_bold = tkfont.Font(family=base, size=10, weight="bold")
        self.font_header = tkfont.Font(family=base, size=11, weight="bold")
        self.font_nav = tkfont.Font(family=base, size=12, weight="bold")
        self.font_footer = tkfont.Font(family=base, size=9)

    # ------------------------------------------------------------------
    # Build shell (once): input row, nav bar, grid and footer
    # ------------------------------------------------------------------
    def _build_shell(self) -> None:
        outer = tk.Frame(self.root, bg=GRID_BG)
        outer.pack(padx=6, pady=4)

        # Visible field (canonical string) and the machine-readable timestamp
        self.text_var = tk.StringVar(value=self.controller.display_text())
        self.timestamp_var = tk.StringVar()
        entry = tk.Entry(outer, textvariable=self.text_var, justify="center",
                         font=self.font_normal, width=14)
        entry.pack(fill="x")
        entry.bind("<Return>", self._on_entry_return)
        entry.bind("<Button-1>", lambda _e: self.open())
        tk.Label(outer, textvariable=self.timestamp_var, font=self.font_footer,
                 bg=GRID_BG, fg="#888888").pack()

        self._popup = tk.Frame(outer, bg=GRID_BG)

        # Navigation row: ◀◀  ◀  ▶  ▶▶ (mirrored for right-to-left)
        nav = tk.Frame(self._popup, bg=GRID_BG)
        nav.pack(fill="x", pady=(0, 2))
        back, forward = ("right", "left") if self._rtl else ("left", "right")
        back_glyph, forward_glyph = ("▶", "◀") if self._rtl else ("◀", "▶")
        for text, side, action in (
            (back_glyph * 2, back, lambda: self.controller.change_year(-1)),
            (back_glyph, back, lambda: self.controller.change_month(-1)),
            (forward_glyph * 2, forward, lambda: self.controller.change_year(1)),
            (forward_glyph, forward, lambda: self.controller.change_month(1)),
        ):
            btn = tk.Label(nav, text=text, font=self.font_nav, bg=GRID_BG, cursor="hand2")
            btn.pack(side=side, padx=6)
            btn.bind("<Button-1>", lambda _e, a=action: self._run(a))

        fonts = {"header": self.font_header, "bold": self.font_bold,
                 "normal": self.font_normal}
        abbrs = WEEKDAY_ABBR if self._rtl else WEEKDAY_ABBR_EN
        self._panel = _GridPanel(self._popup, fonts, abbrs, self._rtl, self._on_cell_click)
        self._panel.frame.pack()

        # Footer: quick dates, Today, Clear, status line
        quick = tk.Frame(self._popup, bg=GRID_BG)
        quick.pack(fill="x", pady=(4, 0))
        for days in self._quick_dates:
            label = _QUICK_LABELS.get(days, f"+{days}")
            tk.Button(quick, text=label, font=self.font_footer,
                      command=lambda n=days: self._run(
                          lambda: self.controller.select_relative(n))).pack(side="left", padx=2)

        actions = tk.Frame(self._popup, bg=GRID_BG)
        actions.pack(fill="x", pady=(2, 0))
        tk.Button(actions, text="امروز", width=8, command=lambda: self._run(
            self.controller.select_today)).pack(side="left", padx=4)
        tk.Button(actions, text="پاک کردن", width=8, command=lambda: self._run(
            self.controller.clear)).pack(side="left", padx=4)

        self._status = tk.Label(self._popup, font=self.font_footer, bg=GRID_BG, fg=WEEKEND_FG)
        self._status.pack(pady=(4, 0))

    # ------------------------------------------------------------------
    # Render the controller's grid into the pooled labels
    # ------------------------------------------------------------------
    def _render(self) -> None:
        self._widget_dates.clear()
        panel = self._panel
        panel.header.configure(text=self.controller.header_text())

        year, month = self.controller.viewed
        holiday_days = (holidays_for_month(year, month, self._enabled_holidays)
                        if self.system == JALALI else {})

        for r, row in enumerate(self.controller.grid().rows()):
            for idx, cell in enumerate(row):
                lbl = panel.day_cells[r][idx]
                if cell.date is None:
                    lbl.configure(text="", bg=GRID_BG, cursor="")
                    continue
                bg, fg = self._day_colors(cell, idx == 6, cell.date.day in holiday_days)
                lbl.configure(
                    text=str(cell.date.day), bg=bg, fg=fg,
                    font=self.font_bold if cell.is_today else self.font_normal,
                    cursor="" if cell.is_disabled else "hand2",
                )
                if not cell.is_disabled:
                    self._widget_dates[id(lbl)] = cell.date

    # ------------------------------------------------------------------
    # Day colour logic
    # ------------------------------------------------------------------
    def _day_colors(self, cell: GridCell, is_weekend: bool,
                    is_holiday: bool) -> tuple[str, str]:
        if cell.is_disabled:
            return GRID_BG, DISABLED_FG
        if cell.is_selected:
            return SEL_BG, "black"
        if cell.is_today:
            return ACCENT, "white"
        if is_holiday:
            return self._holiday_color, "white"
        if is_weekend:
            return GRID_BG, WEEKEND_FG
        return GRID_BG, "black"

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def _run(self, action: Callable[[], object]) -> None:
        """Run a controller operation, reporting calendar errors in the footer."""
        self._status.configure(text="")
        try:
            action()
        except DateDisabled as exc:
            self._status.configure(text=f"{exc.date} خارج از بازه مجاز است")
        except CalendarError as exc:
            self._status.configure(text=str(exc))
        self._sync_popup()

    def _on_cell_click(self, event: tk.Event) -> None:
        d = self._widget_dates.get(id(event.widget))
        if d is not None:
            self._run(lambda: self.controller.select_date(d))

    def _on_arrow(self, key: str) -> None:
        if not self.controller.is_open:
            return
        deltas = _KEY_DELTAS.get(self.system, _KEY_DELTAS_LTR)
        self._run(lambda: self.controller.navigate_by(deltas[key]))

    def _on_return(self, _event: tk.Event) -> None:
        if self.controller.is_open:
            self._run(self.controller.confirm)

    def _on_entry_return(self, _event: tk.Event) -> str:
        text = self.text_var.get()
        if text.strip():
            self._run(lambda: self.controller.set_date(text))
        else:
            self._run(self.controller.clear)
        return "break"

    def _on_selection_change(self, selected: DateValue | None, text: str) -> None:
        self.text_var.set(text)
        self.timestamp_var.set(selected.to_timestamp() if selected is not None else "")

    def _report_callback_exception(self, exc_type, exc_value, exc_tb) -> None:
        logger.error("Unhandled exception in tkinter callback",
                     exc_info=(exc_type, exc_value, exc_tb))

    # ------------------------------------------------------------------
    # Show / Hide
    # ------------------------------------------------------------------
    def _sync_popup(self) -> None:
        if self.controller.is_open:
            self._render()
            self._popup.pack()
        else:
            self._popup.pack_forget()

    def open(self) -> None:
        self.controller.set_today(DateValue.from_date(self._today_fn(), self.system))
        self.controller.open()
        self._status.configure(text="")
        self._sync_popup()

    def close(self) -> None:
        self.controller.close()
        self._sync_popup()

    def toggle(self) -> None:
        if self.controller.is_open:
            self.close()
        else:
            self.open()

    def show(self) -> None:
        self.root.deiconify()
        self.root.lift()
        self.root.focus_force()
        self.open()

    def select_today(self) -> None:
        self.show()
        self._run(self.controller.select_today)
