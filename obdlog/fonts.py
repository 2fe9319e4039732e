"""Bitmap glyphs for small displays: a 5x8 ASCII font, digit fonts and icons.

Glyphs are column-major: each byte is one column of eight pixels with the
least significant bit at the top.  Glyphs taller than eight pixels store
their columns in consecutive bytes.
"""

from __future__ import annotations

_FIRST_CHAR = "!"
_LAST_CHAR = "~"

# One entry per character from '!' to '~'.
_FONT_5X8: tuple[bytes, ...] = tuple(
    bytes.fromhex(h)
    for h in (
        "00005f0000", "0007000700", "147f147f14", "242a7f2a12", "2313086462",
        "3649552250", "0005030000", "001c224100", "0041221c00", "14083e0814",
        "08083e0808", "0050300000", "0808080808", "0060600000", "2010080402",
        "3e5149453e", "00427f4000", "4261514946", "2141454b31", "1814127f10",
        "2745454539", "3c4a494930", "0171090503", "3649494936", "064949291e",
        "0036360000", "0056360000", "0814224100", "1414141414", "0041221408",
        "0201510906", "324979413e", "7e1111117e", "7f49494936", "3e41414122",
        "7f4141221c", "7f49494941", "7f09090901", "3e4149497a", "7f0808087f",
        "00417f4100", "2040413f01", "7f08142241", "7f40404040", "7f020c027f",
        "7f0408107f", "3e4141413e", "7f09090906", "3e4151215e", "7f09192946",
        "4649494931", "01017f0101", "3f4040403f", "1f2040201f", "3f4038403f",
        "6314081463", "0708700807", "6151494543", "007f414100", "0204081020",
        "0041417f00", "0402010204", "4040404040", "0001020400", "2054545478",
        "7f48444438", "3844444420", "384444487f", "3854545418", "087e090102",
        "0c5252523e", "7f08040478", "00447d4000", "2040443d00", "7f10284400",
        "00417f4000", "7c04180478", "7c08040478", "3844444438", "7c14141408",
        "081414187c", "7c08040408", "4854545420", "043f444020", "3c4040207c",
        "1c2040201c", "3c4030403c", "4428102844", "0c5050503c", "4464544c44",
        "0008364100", "00007f0000", "0041360800", "1008081008",
    )
)

_DIGITS_16X24: tuple[bytes, ...] = tuple(
    bytes.fromhex(h)
    for h in (
        "000000 F0FF0F FCFF3F FEFF7F FEFF7F FFFFFF FFFFFF 0700E0 0700E0 0700E0 FFFFFF FFFFFF FEFF7F FEFF7F FCFF3F F0FF0F",
        "000000 700000 700000 700000 780000 F80000 FCFFFF FEFFFF FEFFFF FFFFFF FFFFFF FFFFFF 000000 000000 000000 000000",
        "000000 F800E0 FC00F8 FE00FE FE80FF FFC0FF 07F0FF 07FCFF 07FFEF FFE3FF FFE1FE 7FE0FE 3FE0FC 0FE0F0 030000 000000",
        "000000 F8801F FE803F FE807F FF807F FF80FF FF9CFF FF9CFF 071CE0 073EE0 FFFFFF FFFFFF FEFF7F FEF77F FCF73F F0E31F",
        "00F00F 00FE0F 80FF0F E0FF0F FCBF0F FF870F FF810F 3F800F FFFFFF FFFFFF FFFFFF FFFFFF FFFFFF FFFFFF 00800F 00800F",
        "000000 FFC70F FFC73F FFC77F FFC77F FFC7FF FFC7FF 8701E0 C701E0 C701E0 C7FFFF C7FFFF C7FF7F 87FF7F 87FF3F 07FE1F",
        "000000 F0FF0F FCFF3F FEFF7F FEFF7F FFFFFF FFFFFF 0706E0 0707E0 0707E0 3FFFFF 3FFFFF 3EFF7F 3EFE7F 3CFE3F 38F81F",
        "000000 070000 070000 0700C0 0700F8 0700FF 07E0FF 07FEFF C7FFFF FFFF3F FFFF07 FFFF00 FF0F00 FF0100 1F0000 000000",
        "000000 F0E31F FCF73F FEFF7F FEFF7F FFFFFF FFFFFF 071CE0 071CE0 071CE0 FFFFFF FFFFFF FEFF7F FEF77F FCF73F F0E31F",
        "000000 F81F1C FC7F3C FE7F7C FEFF7C FFFFFC FFFFFC 07E0E0 07E0E0 0760E0 FFFFFF FFFFFF FEFF7F FEFF7F FCFF3F F0FF0F",
    )
)

_DIGITS_16X16: tuple[bytes, ...] = tuple(
    bytes.fromhex(h)
    for h in (
        "00E0F8FC FE1E0707 07071EFE FCF8F000 00070F3F 3F7C7070 70707C3F 1F1F0700",
        "00000006 0707FFFF FFFF0000 00000000 00000000 00007F7F 7F7F0000 00000000",
        "00383C3E 3E0F0707 07CFFFFE FE380000 00404060 70787C7E 7F777371 70700000",
        "00181C1E 1E0FC7C7 E7FFFEBE 9C000000 000C1C3C 3C787070 70797F3F 1F0F0000",
        "000080C0 E070381C 1EFFFFFF FF000000 06070707 06060606 067F7F7F 7F060600",
        "00000000 F0FFFFFF E7E7E7E7 C7870000 00003878 71707070 7070393F 3F1F0F00",
        "0080E0F0 F8FC7F7F 6F67E1E1 C0800000 000F1F3F 3F787070 7070783F 3F1F0F00",
        "00070707 0707C7E7 F7FF7F3F 1F070301 0020387C 7E3F0F07 03000000 00000000",
        "0000001C BEFEFFE7 C3C3E7FF FEBE1C00 00000E3F 3F7F7160 6060717F 3F3F0F00",
        "0078FCFE FE8F0707 07078FFE FEFCF800 00000001 4343737B 7F7F1F0F 07030000",
    )
)

_DIGITS_8X8: tuple[bytes, ...] = tuple(
    bytes.fromhex(h)
    for h in (
        "3C7E8381817E3C00",
        "848482FFFF808000",
        "84C6E1A1B19F8E00",
        "42C3818989FF7600",
        "20382422FFFF2000",
        "5FDF998989F97000",
        "3C7E898989FB7200",
        "0101E1F91D070100",
        "6EFF898999FF7600",
        "4EDF9191917F3E00",
    )
)

_DIGIT_FONTS: dict[tuple[int, int], tuple[bytes, ...]] = {
    (16, 24): _DIGITS_16X24,
    (16, 16): _DIGITS_16X16,
    (8, 8): _DIGITS_8X8,
}

# 16x16 icons.
_ICONS: dict[str, bytes] = {
    "tick": bytes.fromhex(
        "0080C0E0 C0800080 C0E0F0F8 FC783000 00010307 0F1F1F1F 0F070301 00000000"
    ),
    "cross": bytes.fromhex(
        "000C1C3C 78F0E0C0 E0F0783C 1C0C0000 0030383C 1E0F0703 070F1E3C 38300000"
    ),
}


def glyph_5x8(char: str) -> bytes:
    """Return the five column bytes of a printable ASCII character."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    if not _FIRST_CHAR <= char <= _LAST_CHAR:
        raise ValueError(f"no 5x8 glyph for {char!r}")
    return _FONT_5X8[ord(char) - ord(_FIRST_CHAR)]


def _parse_size(size: str | tuple[int, int]) -> tuple[int, int]:
    if isinstance(size, str):
        parts = size.lower().split("x")
        if len(parts) != 2 or not all(p.isdigit() for p in parts):
            raise ValueError(f"invalid glyph size {size!r}")
        return int(parts[0]), int(parts[1])
    width, height = size
    return int(width), int(height)


def digit_glyph(digit: int | str, size: str | tuple[int, int] = "16x24") -> bytes:
    """Return the glyph of a decimal digit in one of the sizes 16x24, 16x16 or 8x8."""
    key = _parse_size(size)
    font = _DIGIT_FONTS.get(key)
    if font is None:
        known = ", ".join(f"{w}x{h}" for w, h in _DIGIT_FONTS)
        raise ValueError(f"no digit font of size {key[0]}x{key[1]}; known sizes: {known}")
    if isinstance(digit, str):
        if len(digit) != 1 or digit not in "0123456789":
            raise ValueError(f"not a decimal digit: {digit!r}")
        value = int(digit)
    else:
        value = int(digit)
        if not 0 <= value <= 9:
            raise ValueError(f"not a decimal digit: {digit!r}")
    return font[value]


def icon(name: str) -> bytes:
    """Return the 16x16 bitmap of the icon ``tick`` or ``cross``."""
    try:
        return _ICONS[name]
    except KeyError:
        known = ", ".join(sorted(_ICONS))
        raise KeyError(f"unknown icon {name!r}; known icons: {known}") from None