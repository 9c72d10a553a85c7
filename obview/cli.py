"""Command-line options of the board viewer."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from obview.confparse import APP_NAME

_C_SPACE = " \t\n\v\f\r"
_INT_RE = re.compile(rf"[{_C_SPACE}]*([+-]?[0-9]+)")
_FLOAT_RE = re.compile(
    rf"[{_C_SPACE}]*([+-]?(?:inf(?:inity)?|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))",
    re.IGNORECASE,
)

HELP = (
    " [-h] [-V] [-l] [-c <config file>] [-i <intput file>] [-x <width>] [-y <height>]"
    " [-z <fontsize>] [-p <dpi>] [-r <renderer>] [-d]\n"
    "\t-h : This help\n"
    "\t-V : Version information\n"
    "\t-l : slow CPU mode, disables AA and other items to try provide more FPS\n"
    f"\t-c <config file> : alternative configuration file (default is ~/.config/{APP_NAME}/obv.conf)\n"
    "\t-i <input file> : board file to load\n"
    "\t-x <width> : Set window width\n"
    "\t-y <height> : Set window height\n"
    "\t-z <pixels> : Set font size\n"
    "\t-p <dpi> : Set the dpi\n"
    "\t-r <renderer> : Set the renderer [ OPENGL1 = 1; OPENGL3 = 2; OPENGLES2 = 3 ]\n"
    "\t-d : Debug mode\n"
)

MAX_FONT_PIXELS = 72.0
MAX_LARGE_FONT_SCALE = 8.0


class UsageError(Exception):
    """The command line could not be understood."""


@dataclass
class Options:
    """Settings taken from the command line; zero or None means "not given"."""

    input_file: str | None = None
    config_file: str | None = None
    slow_cpu: bool = False
    width: int = 0
    height: int = 0
    dpi: int = 0
    font_size: float = 0.0
    debug: bool = False
    renderer: int | None = None
    show_help: bool = False
    show_version: bool = False


def _strtol(text: str) -> int:
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _strtof(text: str) -> float:
    match = _FLOAT_RE.match(text)
    return float(match.group(1)) if match else 0.0


def _truncate(value: float) -> int:
    if math.isnan(value) or math.isinf(value):
        return 0
    return math.trunc(value)


_VALUE_OPTIONS = {
    "-c": ("<config>", "config_file", str),
    "-i": ("<input file>", "input_file", str),
    "-x": ("<window width>", "width", _strtol),
    "-y": ("<window height>", "height", _strtol),
    "-z": ("<font size>", "font_size", _strtof),
    "-p": ("<dpi>", "dpi", lambda text: _truncate(_strtof(text))),
    "-r": ("<render engine>", "renderer", _strtol),
}


def parse_parameters(argv) -> Options:
    """Parse the arguments that follow the program name.

    ``-h`` and ``-V`` stop parsing and set ``show_help`` or ``show_version``.
    A single argument that is not an option is taken as the board file.
    Raises UsageError for a missing option value or an unknown option.
    """
    args = list(argv)
    options = Options()
    index = 0
    while index < len(args):
        arg = args[index]
        index += 1

        if arg.startswith("-psn_"):
            continue
        if arg == "-h":
            options.show_help = True
            return options
        if arg == "-V":
            options.show_version = True
            return options

        if arg in _VALUE_OPTIONS:
            placeholder, attribute, convert = _VALUE_OPTIONS[arg]
            if index >= len(args) or args[index].startswith("-"):
                raise UsageError(f"Not enough parameters for {arg} {placeholder}")
            setattr(options, attribute, convert(args[index]))
            index += 1
        elif arg == "-l":
            options.slow_cpu = True
        elif arg == "-d":
            options.debug = True
        elif len(args) == 1:
            options.input_file = args[0]
            return options
        else:
            raise UsageError(f"Unknown parameter '{arg}'")
    return options


def usage(program) -> str:
    """Help text for ``program``."""
    return f"{program} {HELP}"


def font_scale_factor(font_size) -> float:
    """Largest scale for the zoomed font that keeps the font atlas within bounds."""
    font_size = float(font_size)
    max_squared = MAX_FONT_PIXELS**2 - font_size**2 - (font_size / 2.0) ** 2
    if max_squared < 1.0:
        max_squared = 1.0
    if font_size == 0.0:
        return MAX_LARGE_FONT_SCALE
    return min(MAX_LARGE_FONT_SCALE, math.sqrt(max_squared) / font_size)