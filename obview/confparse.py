"""Reading and rewriting of ``key = value`` configuration files."""

from __future__ import annotations

import math
import os
import re
from pathlib import Path

APP_NAME = "OpenBoardView"

MAX_VALUE_SIZE = 10240

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"

_C_SPACE = " \t\n\v\f\r"

_INT_RE = re.compile(rf"[{_C_SPACE}]*([+-]?[0-9]+)")
_HEX_RE = re.compile(rf"[{_C_SPACE}]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")
_FLOAT_RE = re.compile(
    rf"[{_C_SPACE}]*([+-]?(?:inf(?:inity)?|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))",
    re.IGNORECASE,
)
_LINE_END_RE = re.compile(r"[\0\r\n]")

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_ULONG_MAX = 2**64 - 1

_DEFAULT_LINES = [
    "#",
    f"# {APP_NAME} configuration",
    "#",
    "# Renderer options",
    "#  1 = OpenGL1",
    "#  2 = OpenGL3",
    "#  3 = OpenGLES2",
    "renderer=2",
    "",
    "windowX=1200",
    "windowY=700",
    "",
    "# Reference DPI is 100, increase if you have a higher density (ie, small 4K or 2K screen)",
    "dpi=100",
    "",
    "fontName = ",
    "fontSize = 20",
    "showInfoPanel = true",
    "infoPanelWidth = 300",
    "showPins = true",
    "showPosition = true",
    "showNetWeb = true",
    "showBackgroundImage = true",
    "pinSelectMasks = true",
    "pinSizeThresholdLow = 0",
    "pinShapeCircle = true",
    "pinShapeSquare = false",
    "",
    "slowCPU =       false",
    "showFPS =       false",
    "pinHalo =       false",
    "pinHaloDiameter = 1.1",
    "pinHaloThickness = 4",
    "",
    "fillParts =\t\ttrue",
    "showPartName =  true",
    "showPinName =  true",
    "boardFill =\t\ttrue",
    "boardFillSpacing = 3",
    "",
    "zoomFactor = 5",
    "zoomModifier = 5",
    "",
    "panFactor = 30",
    "panModifier = 5",
    "",
    "centerZoomSearchResults = true",
    "infoPanelCenterZoomNets = true",
    "infoPanelSelectPartsOnNet = true",
    "partZoomScaleOutFactor = 3.0",
    "",
    "# Flip board modes",
    "#  0: flip whole board in view port, shift-flip to flip around mouse ptr",
    "#  1: flip around mouse ptr, shift-flip to flip view port",
    "flipMode = 0",
    "",
    "showAnnotations = true",
    "annotationBoxSize = 20",
    "annotationBoxOffset = 8",
    "",
    "netWebThickness = 2",
    "",
    "pdfSoftwarePath = SumatraPDF.exe",
    "#",
    '# "XRayBlue" Theme',
    "# Colors, format is 0xRRGGBBAA",
    "#",
    "# There's two built in themes, light (default) and dark ",
    "#colorTheme = default",
    "#colorTheme = dark",
    "colorTheme = light",
    "backgroundColor\t\t= 0xffffffff",
    "boardFillColor\t= 0xddddddff",
    "partOutlineColor = 0x444444ff",
    "partHullColor\t\t\t= 0x80808080",
    "partFillColor = 0xffffff77",
    "partTextColor\t\t\t= 0x80808080",
    "partHighlightedFillColor = 0xf4f0f0ff",
    "partHighlightedColor = 0xff0000ee",
    "partHighlightedTextColor\t\t\t= 0xff3030ff",
    "partHighlightedTextBackgroundColor\t\t\t= 0xffff00ff",
    "",
    "# Pin colourings.",
    "#  default is for pins that aren't selected",
    "#  selected is for the actual clicked on pin",
    "#  highlighted is for pins usually on the same network as the selected",
    "#",
    "# There's an absense of 'fill' colours on most because the CPU hit is",
    "# moderately high to do them all ",
    "#",
    "boardOutlineColor\t\t\t= 0x444444ff",
    "pinDefaultColor\t\t\t\t= 0x22aa33ff",
    "pinDefaultTextColor\t\t\t= 0x666688ff",
    "pinTextBackgroundColor\t\t= 0xffffff80",
    "pinGroundColor\t\t\t\t= 0x2222aaff",
    "pinNotConnectedColor\t\t= 0xaaaaaaff",
    "pinTestPadColor\t\t\t\t= 0x888888ff",
    "pinTestPadFillColor\t\t\t\t= 0xbd9e2dff",
    "",
    "pinSelectedColor\t\t\t\t= 0x00000000",
    "pinSelectedFillColor\t\t\t= 0x8888ffff",
    "pinSelectedTextColor\t\t\t= 0xffffffff",
    "",
    "pinSameNetColor\t\t\t= 0x0000ffff",
    "pinSameNetFillColor\t\t= 0x9999ffff",
    "pinSameNetTextColor\t\t= 0x111111ff",
    "",
    "pinHaloColor\t\t\t= 0x22FF2288",
    "",
    "pinNetWebColor = 0xff0000aa",
    "pinNetWebOSColor = 0x0000ff33",
    "",
    "annotationPopupTextColor = 0x000000ff",
    "annotationPopupBackgroundColor = 0xeeeeeeff",
    "annotationBoxColor = 0xff0000aa",
    "annotationStalkColor = 0x000000ff",
    "",
    "selectedMaskPins\t\t= 0xffffffff",
    "selectedMaskParts\t\t= 0xffffffff",
    "selectedMaskOutline\t\t= 0xffffffff",
    "",
    "orMaskPins\t\t= 0x00000000",
    "orMaskParts\t\t= 0x00000000",
    "orMaskOutline\t= 0x00000000",
    "# EndColors",
    "",
    "# FZKey requires 44 32-bit values in order for it to work.",
    "#  If you have the key, put it in here as a single line, each value comma separated",
    "#FZKey = 0x12345678, 0x12345678",
    "FZKey =   ",
    "",
    "# END OF CONF",
]

DEFAULT_CONF = "\r\n".join(_DEFAULT_LINES) + "\r\n"


def _is_c_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


class Confparse:
    """A configuration file held in memory, with lookups and in-place edits."""

    def __init__(self) -> None:
        self.filepath: Path | None = None
        self.conf: str | None = None

    def load(self, filepath, save_default=False) -> None:
        """Read ``filepath``; if it cannot be read, create it (default or empty) first."""
        path = Path(filepath)
        try:
            self._read(path)
            return
        except OSError:
            self.conf = None
        if save_default:
            self.save_default(path)
        else:
            path.write_bytes(b"")
            self._read(path)

    def save_default(self, filepath) -> None:
        """Write the default configuration to ``filepath`` and load it."""
        path = Path(filepath)
        path.write_bytes(DEFAULT_CONF.encode(_ENCODING, _ERRORS))
        self._read(path)

    def _read(self, path: Path) -> None:
        data = path.read_bytes()
        self.conf = data.decode(_ENCODING, _ERRORS)
        self.filepath = path

    def _locate(self, key: str) -> tuple[int, int] | None:
        """Span of the value of the first line-leading ``key``, if any."""
        conf = self.conf or ""
        limit = len(conf)
        keylen = len(key)
        start = conf.find(key)
        while start != -1:
            p = start + keylen
            if p < limit and not _is_c_alnum(conf[p]):
                while p < limit and conf[p] in "= \t":
                    p += 1
                if p < limit and (start == 0 or conf[start - 1] in "\r\n"):
                    match = _LINE_END_RE.search(conf, p)
                    end = match.start() if match else limit
                    return p, end
            start = conf.find(key, start + 1)
        return None

    def parse(self, key):
        """Return the raw value for ``key``, or None when it is not set."""
        if not self.conf or not key:
            return None
        span = self._locate(key)
        if span is None:
            return None
        start, end = span
        return self.conf[start : min(end, start + MAX_VALUE_SIZE)]

    def parse_str(self, key, default):
        value = self.parse(key)
        return default if value is None else value

    def parse_int(self, key, default):
        value = self.parse(key)
        if value is None:
            return default
        match = _INT_RE.match(value)
        if not match:
            return 0
        number = int(match.group(1))
        if not _INT32_MIN <= number <= _INT32_MAX:
            return default
        return number

    def parse_hex(self, key, default):
        value = self.parse(key)
        if value is None:
            return default
        if value.startswith("0x"):
            value = value[2:]
        match = _HEX_RE.match(value)
        if not match:
            return 0
        number = int(match.group(2), 16)
        if number > _ULONG_MAX:
            return default
        if match.group(1) == "-":
            number = -number % (_ULONG_MAX + 1)
        return number & 0xFFFFFFFF

    def parse_double(self, key, default):
        value = self.parse(key)
        if value is None:
            return default
        match = _FLOAT_RE.match(value)
        if not match:
            return 0.0
        text = match.group(1)
        number = float(text)
        lowered = text.lower()
        if "inf" in lowered or "nan" in lowered:
            return number
        mantissa = re.split("[eE]", text)[0]
        if math.isinf(number):
            return default
        if number == 0.0 and any(ch in "123456789" for ch in mantissa):
            return default
        return number

    def parse_bool(self, key, default):
        value = self.parse(key)
        if value is None:
            return default
        return value == "true"

    def write_str(self, key, value) -> None:
        """Set ``key`` to ``value`` in the file and reload it."""
        if self.conf is None or self.filepath is None:
            raise RuntimeError("no configuration file loaded")
        if not key:
            raise ValueError("empty configuration key")
        conf = self.conf
        path = self.filepath
        if key not in conf:
            self._rewrite(conf + f"\r\n{key} = {value}")
            return
        span = self._locate(key)
        if span is not None:
            start, end = span
            self._rewrite(conf[:start] + value + conf[end:])
            return
        with path.open("ab") as handle:
            handle.write(f"{key} = {value}\r\n".encode(_ENCODING, _ERRORS))
        self._read(path)

    def _rewrite(self, text: str) -> None:
        path = self.filepath
        assert path is not None
        os.replace(path, path.with_name(path.name + "~"))
        path.write_bytes(text.encode(_ENCODING, _ERRORS))
        self._read(path)

    def write_bool(self, key, value) -> None:
        self.write_str(key, "true" if value else "false")

    def write_int(self, key, value) -> None:
        self.write_str(key, str(int(value)))

    def write_hex(self, key, value) -> None:
        self.write_str(key, f"0x{int(value) & 0xFFFFFFFF:08x}")

    def write_float(self, key, value) -> None:
        self.write_str(key, f"{float(value):f}")