"""Command-line entry point: argument handling and the interactive window."""

from __future__ import annotations

import sys
from typing import Sequence

from fractview.floatparse import parse_double
from fractview.fractal import Fractal, FractalKind, Key
from fractview.numparse import ParseError

USAGE = (
    "Please enter\n"
    '\t"fractview mandelbrot" or\n'
    '\t"fractview julia <value_1> <value_2>"\n'
)
JULIA_ARGS_ERROR = "Error: Invalid or non-numeric arguments for Julia.\n"

_FRAMES_PER_SECOND = 60


class UsageError(Exception):
    """The command line does not name a drawable fractal.

    ``status`` is the exit status the command finishes with.
    """

    def __init__(self, message: str, status: int = 1):
        super().__init__(message)
        self.message = message
        self.status = status


def parse_args(argv: Sequence[str]) -> Fractal:
    """Build the fractal view described by the command-line arguments.

    Accepted forms are ``mandelbrot`` and ``julia <real> <imag>``; the
    name must match exactly.
    """
    args = list(argv)
    if len(args) == 1 and args[0] == FractalKind.MANDELBROT.value:
        return Fractal(kind=FractalKind.MANDELBROT)
    if len(args) == 3 and args[0] == FractalKind.JULIA.value:
        try:
            real = parse_double(args[1])
            imag = parse_double(args[2])
        except ParseError as exc:
            # Bad Julia constants close the viewer rather than fail it.
            raise UsageError(JULIA_ARGS_ERROR + USAGE, status=0) from exc
        return Fractal(kind=FractalKind.JULIA, julia=complex(real, imag))
    raise UsageError(USAGE, status=1)


def _keymap(pygame) -> dict[int, int]:
    # Printable keys share their codes with the keysyms already; only the
    # special keys need translating.
    return {
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_KP_PLUS: Key.PLUS,
        pygame.K_KP_MINUS: Key.MINUS,
    }


def _rgb_bytes(rows: list[list[int]]) -> bytes:
    data = bytearray()
    for row in rows:
        for color in row:
            data += bytes(((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF))
    return bytes(data)


def run(fractal: Fractal) -> None:
    """Show ``fractal`` in a window until it is closed or Escape is pressed."""
    import pygame

    pygame.init()
    try:
        size = (fractal.width, fractal.height)
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption(fractal.name)
        keymap = _keymap(pygame)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if not fractal.handle_key(keymap.get(event.key, event.key)):
                        running = False
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    x, y = event.pos
                    fractal.handle_mouse(event.button, x, y)
            if running and fractal.needs_redraw:
                image = pygame.image.frombuffer(
                    _rgb_bytes(fractal.render()), size, "RGB"
                )
                screen.blit(image, (0, 0))
                pygame.display.flip()
                fractal.needs_redraw = False
            clock.tick(_FRAMES_PER_SECOND)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the viewer; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        fractal = parse_args(argv)
    except UsageError as exc:
        sys.stderr.write(exc.message)
        return exc.status
    run(fractal)
    return 0


if __name__ == "__main__":
    sys.exit(main())