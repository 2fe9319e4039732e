"""Two 8x16 bitmap fonts for printable ASCII from ``!`` to ``}``.

A glyph is sixteen bytes holding eight columns of sixteen pixels. Each
column takes two consecutive bytes: the upper eight pixels first, then the
lower eight. The least significant bit of each byte is the topmost pixel.
"""

from __future__ import annotations

_FIRST_CHAR = "!"
_LAST_CHAR = "}"
GLYPH_SIZE = 16


def _table(rows: tuple[str, ...]) -> tuple[bytes, ...]:
    glyphs = tuple(bytes.fromhex(row) for row in rows)
    expected = ord(_LAST_CHAR) - ord(_FIRST_CHAR) + 1
    if len(glyphs) != expected or any(len(g) != GLYPH_SIZE for g in glyphs):
        raise ValueError("malformed 8x16 font table")
    return glyphs


# One entry per character from '!' to '}'. The backslash repeats the slash.
_DOSLIKE = _table((
    "00000000 7800FC09 FC097800 00000000",  # !
    "00000E00 1E000000 00000000 1E000E00",  # "
    "2002F81F F81F2002 2002F81F F81F2002",  # #
    "00003806 7C0C4408 FF3F4738 CC0F9807",  # $
    "1008380C 28063803 9005C00E 600A300E",  # %
    "8007D80F 7C086408 E408BC07 180F8009",  # &
    "00001000 1C000C00 00000000 00000000",  # '
    "00000000 F003F807 0C0C0408 00000000",  # (
    "00000000 00000408 0C0CF807 F0030000",  # )
    "8000A002 E003C001 C001E003 A0028000",  # *
    "80008000 8000E003 E0038000 80008000",  # +
    "00000000 0020003C 001C0000 00000000",  # ,
    "80008000 80008000 80008000 80008000",  # -
    "00000000 0000000C 000C0000 00000000",  # .
    "0008000C 00060003 8001C000 60003000",  # /
    "F003F807 0C0CC408 C4080C0C F807F003",  # 0
    "00001008 1808FC0F FC0F0008 00080000",  # 1
    "080E0C0F 8409C408 64083C0C 180C0000",  # 2
    "08040C0C 04084408 4408FC0F B8070000",  # 3
    "C001E001 30011809 FC0FFC0F 00090000",  # 4
    "7C047C0C 44084408 4408C40F 84070000",  # 5
    "F007F80F 4C084408 4408C40F 80070000",  # 6
    "0C000C00 840FC40F 64003C00 1C000000",  # 7
    "B807FC0F 44084408 4408FC0F B8070000",  # 8
    "38007C08 44084408 440CFC07 F8030000",  # 9
    "00000000 00003006 30060000 00000000",  # :
    "00000000 0010601C 600C0000 00000000",  # ;
    "00008000 C0016003 3006180C 08080000",  # <
    "20012001 20012001 20012001 20010000",  # =
    "00000000 0808180C 30066003 C0018000",  # >
    "08000C00 0400840D C40D7C00 38000000",  # ?
    "F807FC0F 04088409 C409FC09 F8000000",  # @
    "E00FF00F 98008C00 9800F00F E00F0000",  # A
    "0408FC0F FC0F4408 4408FC0F B8070000",  # B
    "F003F807 0C0C0408 04080C0C 18060000",  # C
    "0408FC0F FC0F0408 0C0CF807 F0030000",  # D
    "0408FC0F FC0F4408 E4080C0C 0C0C0000",  # E
    "0408FC0F FC0F4408 E4000C00 0C000000",  # F
    "F003F807 0C0C0408 84088C07 980F0000",  # G
    "FC0FFC0F 40004000 4000FC0F FC0F0000",  # H
    "00000408 0408FC0F FC0F0408 04080000",  # I
    "0006000E 00080408 FC0FFC07 04000000",  # J
    "0408FC0F FC0FE000 B0011C0F 0C0E0000",  # K
    "0408FC0F FC0F0408 0008000C 000C0000",  # L
    "FC0FFC0F 3000E000 E0003000 FC0FFC0F",  # M
    "FC0FFC0F 30006000 C000FC0F FC0F0000",  # N
    "F807FC0F 04080408 0408FC0F F8070000",  # O
    "0408FC0F FC0F8408 8400FC00 78000000",  # P
    "F807FC0F 0408040C 0418FC3F F8270000",  # Q
    "0408FC0F FC0F4400 C400FC0F 380F0000",  # R
    "18043C0C 64084408 C4088C0F 08070000",  # S
    "0C000C00 0408FC0F FC0F0408 0C000C00",  # T
    "FC07FC0F 00080008 0008FC0F FC070000",  # U
    "FC01FC03 0006000C 000C0006 FC03FC01",  # V
    "FC03FC0F 000E8003 8003000E FC0FFC03",  # W
    "0C0C1C0E 3003E001 E0013003 1C0E0C0C",  # X
    "1C003C00 6008C00F C00F6008 3C001C00",  # Y
    "0C0E0C0F 8409C408 64083408 1C0C0C0C",  # Z
    "00000000 FC0FFC0F 04080408 00000000",  # [
    "0008000C 00060003 8001C000 60003000",  # backslash
    "00000000 04080408 FC0FFC0F 00000000",  # ]
    "00001000 18000C00 06000C00 18001000",  # ^
    "00200020 00200020 00200020 00200020",  # _
    "00000000 00000600 0E000800 00000000",  # `
    "0007A00F A008A008 E007C00F 00080000",  # a
    "0408FC0F FC072008 6008C00F 80070000",  # b
    "C007E00F 20082008 2008600C 40040000",  # c
    "8007C00F 60082408 FC07FC0F 00080000",  # d
    "C007E00F 20092009 2009E00D C0050000",  # e
    "00004008 F80FFC0F 44084C00 08000000",  # f
    "C027E06F 20482048 C07FE03F 20000000",  # g
    "0408FC0F FC0F4000 2000E00F C00F0000",  # h
    "00000000 2008EC0F EC0F0008 00000000",  # i
    "00000020 00600040 2040EC7F EC3F0000",  # j
    "0408FC0F FC0F8001 C003600E 200C0000",  # k
    "00000000 0408FC0F FC0F0008 00000000",  # l
    "E00FE00F 6000C007 C0076000 E00FC00F",  # m
    "2000E00F C00F2000 2000E00F C00F0000",  # n
    "C007E00F 20082008 2008E00F C0070000",  # o
    "2040E07F C07F2048 2008E00F C0070000",  # p
    "C007E00F 20082048 C07FE07F 20400000",  # q
    "2008E00F C00F6008 20006000 40000000",  # r
    "C004E00D 20092009 2009600F 40060000",  # s
    "20002000 F807FC0F 2008200C 00040000",  # t
    "E007E00F 00080008 E007E00F 00080000",  # u
    "E001E003 0006000C 000C0006 E003E001",  # v
    "E007E00F 000C0007 0007000C E00FE007",  # w
    "2008600C C0068003 8003C006 600C2008",  # x
    "E047E04F 00480048 0068E03F E01F0000",  # y
    "600C600E 200BA009 E008600C 200C0000",  # z
    "00004000 4000F807 BC0F0408 04080000",  # {
    "00000000 00007C1F 7C1F0000 00000000",  # |
    "00000408 0408BC0F F8074000 40000000",  # }
))

_TERMINAL = _table((
    "00000000 7C00FE1B FE1B7C00 00000000",  # !
    "00000E00 1E000000 00001E00 0E000000",  # "
    "2001FC0F FC0F2001 2001FC0F FC0F2001",  # #
    "38067C0C 4408FF3F FF3F8408 8C0F1807",  # $
    "1C18141E 9C07E001 781C1E14 061C0000",  # %
    "BC1FFE10 4210C210 FE1F3C0F 80198010",  # &
    "00000000 10001E00 0E000000 00000000",  # '
    "00000000 F007FC1F 0E380220 00000000",  # (
    "00000000 02200E38 FC1FF007 00000000",  # )
    "8000A002 E003C001 C001E003 A0028000",  # *
    "80008000 8000E003 E0038000 80008000",  # +
    "00000000 00400078 00380000 00000000",  # ,
    "80008000 80008000 80008000 80008000",  # -
    "00000000 00000018 00180000 00000000",  # .
    "0018001E 8007E001 78001E00 06000000",  # /
    "F807FC0F 0618C210 C2100618 FC0FF807",  # 0
    "00000810 0C10FE1F FE1F0010 00100000",  # 1
    "041C061E 02138211 C2106210 3E181C18",  # 2
    "04080618 02104210 42104210 FE1FBC0F",  # 3
    "C001E001 30011801 0C11FE1F FE1F0011",  # 4
    "7E087E18 42104210 42104210 C21F820F",  # 5
    "F80FFC1F 46104210 42104210 C01F800F",  # 6
    "06000600 0200021F C21FF200 3E000E00",  # 7
    "BC0FFE1F 42104210 42104210 FE1FBC0F",  # 8
    "3C007E10 42104210 42104218 FE0FFC07",  # 9
    "00000000 0000300C 300C0000 00000000",  # :
    "00000000 0020603C 601C0000 00000000",  # ;
    "8000C001 60033006 180C0C18 04100000",  # <
    "40024002 40024002 40024002 40024002",  # =
    "04100C18 180C3006 6003C001 80000000",  # >
    "04000600 0200821B C21B6200 3E001C00",  # ?
    "FC0FFE1F 02108211 C213E213 FE13FC03",  # @
    "F01FF81F 0C010601 06010C01 F81FF01F",  # A
    "0210FE1F FE1F4210 42104210 FE1FBC0F",  # B
    "F807FC0F 06180210 02100210 06180C0C",  # C
    "0210FE1F FE1F0210 02100618 FC0FF807",  # D
    "0210FE1F FE1F4210 4210E210 06180618",  # E
    "0210FE1F FE1F4210 4200E200 06000600",  # F
    "F807FC0F 06180210 82108210 860F8C1F",  # G
    "FE1FFE1F 40004000 40004000 FE1FFE1F",  # H
    "00000210 0210FE1F FE1F0210 02100000",  # I
    "000C001C 00100010 0210FE1F FE0F0200",  # J
    "0210FE1F FE1FE000 B0011803 0E1E061C",  # K
    "0210FE1F FE1F0210 00100010 00180018",  # L
    "FE1FFE1F 1800F000 F0001800 FE1FFE1F",  # M
    "FE1FFE1F 38007000 E000C001 FE1FFE1F",  # N
    "FC0FFE1F 02100210 02100210 FE1FFC0F",  # O
    "0210FE1F FE1F4210 42004200 7E003C00",  # P
    "FC0FFE1F 0210021C 02380270 FE5FFC0F",  # Q
    "0210FE1F FE1F4200 4200C200 FE1F3C1F",  # R
    "1C0C3E1C 62104210 4210C210 8E1F0C0F",  # S
    "06000600 0210FE1F FE1F0210 06000600",  # T
    "FE0FFE1F 00100010 00100010 FE1FFE0F",  # U
    "FE03FE07 000C0018 0018000C FE07FE03",  # V
    "FE07FE1F 001CC007 C007001C FE1FFE07",  # W
    "0E1C1E1E 3003E001 E0013003 1E1E0E1C",  # X
    "1E003E00 6010C01F C01F6010 3E001E00",  # Y
    "061E061F 8211C210 62103210 1E180E18",  # Z
    "00000000 FE1FFE1F 02100210 00000000",  # [
    "0018001E 8007E001 78001E00 06000000",  # backslash
    "00000000 02100210 FE1FFE1F 00000000",  # ]
    "20003000 18000C00 18003000 20000000",  # ^
    "00800080 00800080 00800080 00800080",  # _
    "00000000 00003800 78004000 00000000",  # `
    "000E201F 20112011 2011E00F C01F0010",  # a
    "0210FE1F FE0F2010 20106010 C01F800F",  # b
    "C00FE01F 20102010 20102010 60184008",  # c
    "800FC01F 60102010 2210FE0F FE1F0010",  # d
    "C00FE01F 20112011 20112011 E019C009",  # e
    "00002010 FC1FFE1F 22102200 06000400",  # f
    "C04FE0DF 20902090 2090C0FF E07F2000",  # g
    "0210FE1F FE1F4000 20002000 E01FC01F",  # h
    "00002010 2010EC1F EC1F0010 00100000",  # i
    "006000C0 20802080 ECFFEC7F 00000000",  # j
    "0210FE1F FE1F8001 8003C006 601C2018",  # k
    "00000210 0210FE1F FE1F0010 00100000",  # l
    "E01FE01F 6000C00F C00F6000 E01FC01F",  # m
    "2000E01F C01F2000 20002000 E01FC01F",  # n
    "C00FE01F 20102010 20102010 E01FC00F",  # o
    "2080E0FF C0FF2090 20102010 E01FC00F",  # p
    "C00FE01F 20102010 2090C0FF E0FF2080",  # q
    "2010E01F C01F6010 20002000 60004000",  # r
    "C008E019 20112011 20132012 601E400C",  # s
    "20002000 FC0FFE1F 20102018 00080000",  # t
    "E00FE01F 00100010 0010E00F E01F0010",  # u
    "E003E007 000C0018 0018000C E007E003",  # v
    "E00FE01F 0018000F 000F0018 E01FE00F",  # w
    "20106018 C00C8007 8007C00C 60182010",  # x
    "E08FE09F 00900090 009000D0 E07FE03F",  # y
    "6018601C 20162013 A011E010 60182018",  # z
    "00000000 8000FC1F 7E3F0220 02200000",  # {
    "00000000 00007C3E 7C3E0000 00000000",  # |
    "00000220 02207E3F FC1F8000 00000000",  # }
))

_STYLES: dict[str, tuple[bytes, ...]] = {
    "doslike": _DOSLIKE,
    "terminal": _TERMINAL,
}


def glyph_8x16(char: str, style: str = "doslike") -> bytes:
    """Return the sixteen bytes of ``char`` in the ``doslike`` or ``terminal`` font."""
    font = _STYLES.get(style)
    if font is None:
        known = ", ".join(sorted(_STYLES))
        raise ValueError(f"unknown font style {style!r}; known styles: {known}")
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    if not _FIRST_CHAR <= char <= _LAST_CHAR:
        raise ValueError(f"no 8x16 glyph for {char!r}")
    return font[ord(char) - ord(_FIRST_CHAR)]