"""Byte-order-mark driven decoding for uploaded markup."""

import codecs
from dataclasses import dataclass, field

_BOMS: tuple[tuple[bytes, str], ...] = (
    (codecs.BOM_UTF8, "utf-8"),
    (codecs.BOM_UTF16_LE, "utf-16-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
)
_BOM_CHAR = "\ufeff"


@dataclass(frozen=True)
class DecodedText:
    text: str
    encoding: str
    warnings: list[str] = field(default_factory=list)


def sniff_encoding(data: bytes) -> tuple[str, int]:
    """Pick the initial codec from a byte-order mark.

    Returns the codec name and the length of the mark (0 when there is none,
    in which case UTF-8 is assumed).
    """
    for bom, encoding in _BOMS:
        if data.startswith(bom):
            return encoding, len(bom)
    return "utf-8", 0


def decode_bytes(data: bytes) -> DecodedText:
    """Decode markup bytes, falling back to Latin-1 when the sniffed codec fails.

    A strict decode fails exactly when a lenient one would have produced
    U+FFFD replacement characters, so the Latin-1 retry only happens for
    bytes that are not valid in the sniffed encoding. Latin-1 maps every
    byte, which makes this function total.
    """
    encoding, bom_length = sniff_encoding(data)
    payload = data[bom_length:]
    warnings: list[str] = []
    try:
        text = payload.decode(encoding)
    except UnicodeDecodeError:
        warnings.append(f"bytes are not valid {encoding}; decoded as latin-1")
        encoding = "latin-1"
        text = payload.decode(encoding)
    return DecodedText(text=text.lstrip(_BOM_CHAR), encoding=encoding, warnings=warnings)
