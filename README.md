# fractview

An interactive viewer for the Mandelbrot set and Julia sets. It opens an
800×800 window that you can pan, zoom and recolour while it runs.

## Installation

```
pip install .
```

This pulls in `pygame`, which is used for the window and input handling.

## Usage

Draw the Mandelbrot set:

```
fractview mandelbrot
```

Draw a Julia set for the constant `c = <real> + <imag>·i`:

```
fractview julia -0.8 0.156
fractview julia 0.285 0.01
```

The fractal name must be given exactly as `mandelbrot` or `julia`.
Both Julia values must be plain decimal numbers: optional surrounding
whitespace, an optional sign, digits and an optional fractional part.
Exponents such as `1e-3` are not accepted.

If the command line names no drawable fractal (wrong name or wrong number
of arguments), a usage message goes to standard error and the command exits
with status 1. If the Julia values are not valid numbers, an error line and
the usage message go to standard error and the command exits with status 0
without opening a window.

## Controls

| Input                   | Action                                          |
|-------------------------|-------------------------------------------------|
| Arrow keys              | Pan the view (the step grows with the zoom)     |
| Mouse wheel             | Zoom in or out around the cursor                |
| `+` / `=` / keypad `+`  | Raise the iteration limit by 10 (at most 600)   |
| `-` / keypad `-`        | Lower the iteration limit by 10 (at least 20)   |
| `c`                     | Cycle through the four colour palettes          |
| `Esc` / close window    | Quit                                            |

The view starts with 42 iterations. The zoom is clamped between `1e-12` and
`20`. Points that never escape are drawn white; escaping points take a
colour from the active palette based on how many iterations they took.

## Using it as a library

The pieces behind the viewer can be used on their own:

- `fractview.fractal.Fractal` holds the view state (kind, Julia constant,
  zoom, shift, iteration limit, palette) and computes escape times with
  `escape_time()`, pixel colours with `pixel_color()` and whole frames with
  `render()`, which returns rows of `0xRRGGBB` integers. `handle_key()` and
  `handle_mouse()` apply the same input rules as the viewer, using the
  `Key` and `MouseButton` codes; `handle_key()` returns `False` when the
  viewer should close.
- `fractview.mathutils` provides `map_range`, `sum_complex` and
  `square_complex` together with the `Range` type.
- `fractview.floatparse.parse_double` and `fractview.numparse.parse_int` /
  `parse_long` are strict number parsers that raise
  `fractview.numparse.ParseError` on bad input. Its `kind` is a
  `ParseErrorKind` (`OVERFLOW`, `INVALID_CHAR`, `NO_DIGITS`,
  `EMPTY_STRING`), and on overflow its `value` holds the saturated limit.
- `fractview.app.parse_args` turns command-line arguments into a `Fractal`
  or raises `UsageError`, whose `status` is the exit status to use;
  `fractview.app.run` opens the window for a given fractal and
  `fractview.app.main` is the command itself.

## Running the tests

```
pip install .[test]
pytest
```