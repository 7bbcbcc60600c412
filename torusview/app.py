"""Tk front end: a number prompt and an interactive torus window."""

from __future__ import annotations

import re
from typing import Any

from .renderer import AxisCommand, PolygonCommand, TorusRenderer

TORUS_GRAPHIC = 3
WINDOW_SIZE = 800
MIN_A = 2.0
MAX_A = 4.9
STEP_A = 0.3
MIN_B = 0.5
MAX_B = 2.0
STEP_B = 0.1
MIN_SCALE = 10.0
MAX_SCALE = 200.0
ZOOM_IN = 1.1
ZOOM_OUT = 0.9
SHIFT_MASK = 0x0001

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_graphic_number(text: str) -> int:
    """Read a leading integer from text, giving 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def format_title(a: float, b: float) -> str:
    """Window title showing the torus radii."""
    return f"Torus: a = {a:.1f}, b = {b:.1f}"


def zoom_scale(scale: float, delta: int) -> float:
    """Scale after one mouse-wheel notch, kept between the zoom limits."""
    new_scale = scale * (ZOOM_IN if delta > 0 else ZOOM_OUT)
    return max(MIN_SCALE, min(MAX_SCALE, new_scale))


def step_parameters(
    a: float, b: float, increase: bool, shift: bool
) -> tuple[float, float]:
    """Radii after a plus or minus key press; shift changes b instead of a."""
    if increase:
        if shift:
            if b < MAX_B:
                b += STEP_B
        elif a < MAX_A:
            a += STEP_A
    else:
        if shift:
            if b > MIN_B:
                b -= STEP_B
        elif a > MIN_A:
            a -= STEP_A
    return a, b


def _hex_color(rgb: tuple[int, int, int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


class TorusWindow:
    """A top-level window showing a rotatable, zoomable shaded torus."""

    def __init__(self, master: Any, a: float, b: float) -> None:
        import tkinter as tk

        self.window = tk.Toplevel(master)
        self.window.geometry(f"{WINDOW_SIZE}x{WINDOW_SIZE}+450+100")
        self.canvas = tk.Canvas(
            self.window,
            width=WINDOW_SIZE,
            height=WINDOW_SIZE,
            background="white",
            highlightthickness=0,
        )
        self.canvas.pack(fill=tk.BOTH, expand=True)

        self.renderer = TorusRenderer(WINDOW_SIZE, WINDOW_SIZE)
        self.renderer.change_parameters(max(MIN_A, a), max(MIN_B, b))
        self._update_title()

        self.canvas.bind("<ButtonPress-1>", self._on_press)
        self.canvas.bind("<ButtonRelease-1>", self._on_release)
        self.canvas.bind("<Motion>", self._on_motion)
        self.canvas.bind("<MouseWheel>", self._on_wheel)
        self.canvas.bind("<Button-4>", lambda _e: self._zoom(1))
        self.canvas.bind("<Button-5>", lambda _e: self._zoom(-1))
        self.window.bind("<KeyPress>", self._on_key)
        self.window.focus_set()

        self.redraw()

    def destroy(self) -> None:
        """Close the window."""
        self.window.destroy()

    def redraw(self) -> None:
        """Clear the canvas and draw the current view of the torus."""
        self.canvas.delete("all")
        for command in self.renderer.render():
            if isinstance(command, PolygonCommand):
                coords = [c for point in command.points for c in point]
                self.canvas.create_polygon(
                    *coords,
                    fill=_hex_color(command.fill),
                    outline=_hex_color(command.outline),
                    width=command.outline_width,
                )
            elif isinstance(command, AxisCommand):
                self.canvas.create_line(
                    *command.start,
                    *command.end,
                    fill=_hex_color(command.color),
                    width=command.width,
                )
                self.canvas.create_text(
                    *command.end, text=command.label, anchor="nw"
                )

    def _update_title(self) -> None:
        self.window.title(format_title(self.renderer.a, self.renderer.b))

    def _on_press(self, event: Any) -> None:
        self.renderer.start_drag(event.x, event.y)
        self.canvas.grab_set()

    def _on_release(self, _event: Any) -> None:
        self.renderer.end_drag()
        self.canvas.grab_release()

    def _on_motion(self, event: Any) -> None:
        self.renderer.update_drag(event.x, event.y)
        if self.renderer.is_dragging:
            self.redraw()

    def _on_wheel(self, event: Any) -> None:
        self._zoom(event.delta)

    def _zoom(self, delta: int) -> None:
        self.renderer.scale = zoom_scale(self.renderer.scale, delta)
        self.redraw()

    def _on_key(self, event: Any) -> None:
        shift = bool(event.state & SHIFT_MASK)
        if event.keysym in ("KP_Add", "plus"):
            increase: bool | None = True
        elif event.keysym in ("KP_Subtract", "minus"):
            increase = False
        else:
            increase = None

        if increase is not None:
            a, b = step_parameters(
                self.renderer.a, self.renderer.b, increase, shift
            )
            self.renderer.change_parameters(a, b)
            self.redraw()
        self._update_title()


class InputWindow:
    """The main window asking which graphic to build."""

    def __init__(self, master: Any) -> None:
        import tkinter as tk

        self.master = master
        self.master.title("Choose graphic's number")
        self.master.geometry("350x200+100+100")

        tk.Label(master, text="Enter graphic's number", anchor="w").place(
            x=10, y=10, width=300, height=20
        )
        self.entry = tk.Entry(master)
        self.entry.insert(0, "1")
        self.entry.place(x=10, y=40, width=300, height=30)
        tk.Button(master, text="Build a graph", command=self.build_graph).place(
            x=10, y=80, width=300, height=30
        )
        self.master.bind("<Return>", lambda _e: self.build_graph())

        self.torus_window: TorusWindow | None = None

    def build_graph(self) -> None:
        """Open the graphic chosen in the entry, or report a bad choice."""
        from tkinter import messagebox

        number = parse_graphic_number(self.entry.get())
        if number == TORUS_GRAPHIC:
            if self.torus_window is not None:
                try:
                    self.torus_window.destroy()
                except Exception:
                    pass
                self.torus_window = None
            self.torus_window = TorusWindow(self.master, MIN_A, MIN_B)
        else:
            messagebox.showerror(
                "Error",
                "Incorrect input! Enter a number 3. While...",
                parent=self.master,
            )


def main(argv: list[str] | None = None) -> int:
    """Start the application and run until the main window is closed."""
    import tkinter as tk

    root = tk.Tk()
    InputWindow(root)
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())