"""Fractal view state, colouring, escape-time rendering and input handling."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from fractview.mathutils import Range, map_range, square_complex, sum_complex

WIDTH = 800
HEIGHT = 800

BLACK = 0x000000
WHITE = 0xFFFFFF
RED = 0xFF0000
GREEN = 0x00FF00
BLUE = 0x0000FF
YELLOW = 0xFFFF00
CYAN = 0x00FFFF
MAGENTA = 0xFF00FF
GRAY = 0x808080
NEON_PINK = 0xFF1493
ELECTRIC_LIME = 0xCCFF00
ACID_GREEN = 0xB0BF1A
HOT_MAGENTA = 0xFF00CC
CYAN_NEON = 0x00FFFF
ULTRA_VIOLET = 0x8A2BE2
ELECTRIC_BLUE = 0x7DF9FF
LAVA_ORANGE = 0xFF4500
SHOCKING_PINK = 0xFC0FC0
RADIOACTIVE_YELLOW = 0xF5FF00
TRIPPY_PURPLE = 0xBF00FF
PSY_RED = 0xFF003F

PALETTES: tuple[tuple[int, int], ...] = (
    (BLACK, WHITE),
    (BLACK, RED),
    (NEON_PINK, ELECTRIC_LIME),
    (TRIPPY_PURPLE, RADIOACTIVE_YELLOW),
)

DEFAULT_ESCAPE_VALUE = 4.0
DEFAULT_ITERATIONS = 42
MIN_ITERATIONS = 20
MAX_ITERATIONS = 600
ITERATION_STEP = 10
MIN_ZOOM = 1e-12
MAX_ZOOM = 20.0
ZOOM_OUT_FACTOR = 1.03
ZOOM_IN_FACTOR = 0.97
PAN_STEP = 0.5


class FractalKind(Enum):
    """The fractal families that can be drawn."""

    MANDELBROT = "mandelbrot"
    JULIA = "julia"


class Key(IntEnum):
    """Key codes the viewer reacts to (X11 keysym values)."""

    ESCAPE = 0xFF1B
    LEFT = 0xFF51
    UP = 0xFF52
    RIGHT = 0xFF53
    DOWN = 0xFF54
    PLUS = 0x2B
    EQUAL = 0x3D
    PLUS_ALT = 161
    MINUS = 0x2D
    MINUS_ALT = 39
    C = 0x63


class MouseButton(IntEnum):
    """Mouse buttons; only the wheel changes the view."""

    LEFT = 1
    MIDDLE = 2
    RIGHT = 3
    WHEEL_UP = 4
    WHEEL_DOWN = 5


_MORE_ITERATIONS_KEYS = frozenset({Key.PLUS, Key.EQUAL, Key.PLUS_ALT})
_FEWER_ITERATIONS_KEYS = frozenset({Key.MINUS, Key.MINUS_ALT})


@dataclass
class Fractal:
    """The view of one fractal: what to draw, where, and how."""

    kind: FractalKind = FractalKind.MANDELBROT
    julia: complex = 0j
    width: int = WIDTH
    height: int = HEIGHT
    escape_value: float = DEFAULT_ESCAPE_VALUE
    iterations: int = DEFAULT_ITERATIONS
    shift_x: float = 0.0
    shift_y: float = 0.0
    zoom: float = 1.0
    needs_redraw: bool = True
    color_index: int = 0

    @property
    def name(self) -> str:
        return self.kind.value

    def get_color(self, iteration: int) -> int:
        """Colour for a point that escaped after ``iteration`` steps."""
        if not 0 <= self.color_index < len(PALETTES):
            return 0
        start, end = PALETTES[self.color_index]
        return int(map_range(iteration, Range(start, end), Range(0.0, self.iterations)))

    def change_color(self) -> None:
        """Cycle to the next palette."""
        self.color_index += 1
        if self.color_index >= len(PALETTES):
            self.color_index = 0

    def increase_iterations(self) -> None:
        self.iterations = min(self.iterations + ITERATION_STEP, MAX_ITERATIONS)

    def decrease_iterations(self) -> None:
        self.iterations = max(self.iterations - ITERATION_STEP, MIN_ITERATIONS)

    def apply_zoom(self, factor: float) -> None:
        """Multiply the zoom by ``factor``, clamped to the allowed range."""
        scaled = self.zoom * factor
        if scaled < MIN_ZOOM:
            self.zoom = MIN_ZOOM
        elif scaled > MAX_ZOOM:
            self.zoom = MAX_ZOOM
        else:
            self.zoom = scaled

    def _view_offset(self, x: float, y: float) -> complex:
        real = map_range(x, Range(-2.0, 2.0), Range(0.0, self.width)) * self.zoom
        imag = map_range(y, Range(2.0, -2.0), Range(0.0, self.height)) * self.zoom
        return complex(real, imag)

    def pixel_to_complex(self, x: float, y: float) -> complex:
        """The point of the complex plane shown at pixel ``(x, y)``."""
        offset = self._view_offset(x, y)
        return complex(offset.real + self.shift_x, offset.imag + self.shift_y)

    def escape_time(self, z: complex, c: complex) -> int:
        """Steps of ``z = z² + c`` before ``|z|²`` exceeds the escape value."""
        for step in range(self.iterations):
            z = sum_complex(square_complex(z), c)
            if z.real * z.real + z.imag * z.imag > self.escape_value:
                return step
        return self.iterations

    def pixel_color(self, x: int, y: int) -> int:
        """Colour of pixel ``(x, y)``; points that never escape are white."""
        z = self.pixel_to_complex(x, y)
        c = self.julia if self.kind is FractalKind.JULIA else z
        steps = self.escape_time(z, c)
        if steps < self.iterations:
            return self.get_color(steps)
        return WHITE

    def render(self) -> list[list[int]]:
        """Colours of every pixel, row by row from the top."""
        return [
            [self.pixel_color(x, y) for x in range(self.width)]
            for y in range(self.height)
        ]

    def handle_key(self, key: int) -> bool:
        """React to a key press; return False when the viewer should close."""
        step = PAN_STEP * self.zoom
        if key == Key.ESCAPE:
            self.needs_redraw = True
            return False
        if key == Key.LEFT:
            self.shift_x += step
        elif key == Key.RIGHT:
            self.shift_x -= step
        elif key == Key.UP:
            self.shift_y -= step
        elif key == Key.DOWN:
            self.shift_y += step
        elif key in _MORE_ITERATIONS_KEYS:
            self.increase_iterations()
        elif key in _FEWER_ITERATIONS_KEYS:
            self.decrease_iterations()
        elif key == Key.C:
            self.change_color()
        self.needs_redraw = True
        return True

    def handle_mouse(self, button: int, x: int, y: int) -> None:
        """Zoom with the wheel, keeping the point under the cursor in place."""
        if button == MouseButton.WHEEL_DOWN:
            factor = ZOOM_OUT_FACTOR
        elif button == MouseButton.WHEEL_UP:
            factor = ZOOM_IN_FACTOR
        else:
            return
        before = self.pixel_to_complex(x, y)
        self.apply_zoom(factor)
        after = self._view_offset(x, y)
        self.shift_x = before.real - after.real
        self.shift_y = before.imag - after.imag
        self.needs_redraw = True