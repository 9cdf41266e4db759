"""NDN TLV primitives: variable-length numbers, blocks and type names."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO

MAX_NDN_PACKET_SIZE = 8800

CONTENT = 21
SIGNATURE_VALUE = 23
INTEREST_SIGNATURE_VALUE = 46

APP_PRIVATE_BLOCK1 = 128
APP_PRIVATE_BLOCK2 = 32767

_MAX_TYPE = 0xFFFFFFFF
_MAX_VAR_NUMBER = 0xFFFFFFFFFFFFFFFF

_EXTRA_OCTETS = {253: 2, 254: 4, 255: 8}

_UNRESERVED = frozenset(
    b"abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-._~"
)

_TLV_NAMES: dict[int, str] = {
    5: "Interest",
    6: "Data",
    7: "Name",
    # Name components
    8: "GenericNameComponent",
    1: "ImplicitSha256DigestComponent",
    2: "ParametersSha256DigestComponent",
    32: "KeywordNameComponent",
    50: "SegmentNameComponent",
    52: "ByteOffsetNameComponent",
    54: "VersionNameComponent",
    56: "TimestampNameComponent",
    58: "SequenceNumNameComponent",
    # Interest packet
    33: "CanBePrefix",
    18: "MustBeFresh",
    30: "ForwardingHint",
    10: "Nonce",
    12: "InterestLifetime",
    34: "HopLimit",
    36: "ApplicationParameters",
    44: "InterestSignatureInfo",
    46: "InterestSignatureValue",
    # Data packet
    20: "MetaInfo",
    21: "Content",
    22: "SignatureInfo",
    23: "SignatureValue",
    24: "ContentType",
    25: "FreshnessPeriod",
    26: "FinalBlockId",
    # (Interest)SignatureInfo
    27: "SignatureType",
    28: "KeyLocator",
    29: "KeyDigest",
    38: "SignatureNonce",
    40: "SignatureTime",
    42: "SignatureSeqNum",
    # Certificate
    253: "ValidityPeriod",
    254: "NotBefore",
    255: "NotAfter",
    258: "AdditionalDescription",
    512: "DescriptionEntry",
    513: "DescriptionKey",
    514: "DescriptionValue",
    # SafeBag
    128: "SafeBag",
    129: "EncryptedKey",
}


class TlvError(ValueError):
    """Raised when TLV data is malformed or incomplete."""


def encode_var_number(value: int) -> bytes:
    """Encode a non-negative integer as an NDN TLV variable-length number."""
    if not 0 <= value <= _MAX_VAR_NUMBER:
        raise TlvError(f"VAR-NUMBER out of range: {value}")
    if value < 253:
        return bytes([value])
    if value <= 0xFFFF:
        return b"\xfd" + value.to_bytes(2, "big")
    if value <= 0xFFFFFFFF:
        return b"\xfe" + value.to_bytes(4, "big")
    return b"\xff" + value.to_bytes(8, "big")


def decode_var_number(data: bytes, offset: int) -> tuple[int, int]:
    """Decode a variable-length number at *offset*; return (value, next offset)."""
    if offset >= len(data):
        raise TlvError("Insufficient data during TLV processing")
    first = data[offset]
    offset += 1
    extra = _EXTRA_OCTETS.get(first)
    if extra is None:
        return first, offset
    end = offset + extra
    if end > len(data):
        raise TlvError("Insufficient data during TLV processing")
    return int.from_bytes(data[offset:end], "big"), end


def _check_type(tlv_type: int) -> int:
    if not 1 <= tlv_type <= _MAX_TYPE:
        raise TlvError(f"Illegal TLV-TYPE {tlv_type}")
    return tlv_type


def _decode_type(data: bytes, offset: int) -> tuple[int, int]:
    tlv_type, offset = decode_var_number(data, offset)
    return _check_type(tlv_type), offset


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def _read_var_number_raw(stream: BinaryIO) -> tuple[int, bytes] | None:
    first = _read_exact(stream, 1)
    if not first:
        return None
    extra = _EXTRA_OCTETS.get(first[0])
    if extra is None:
        return first[0], first
    rest = _read_exact(stream, extra)
    if len(rest) < extra:
        raise TlvError("Insufficient data during TLV processing")
    return int.from_bytes(rest, "big"), first + rest


def read_var_number(stream: BinaryIO) -> int | None:
    """Read a variable-length number from a binary stream.

    Returns None if the stream is already at its end.
    """
    result = _read_var_number_raw(stream)
    return None if result is None else result[0]


def read_block(stream: BinaryIO) -> Block | None:
    """Read one TLV block from a binary stream, or None at end of stream."""
    header = _read_var_number_raw(stream)
    if header is None:
        return None
    tlv_type, type_octets = header
    _check_type(tlv_type)
    length_field = _read_var_number_raw(stream)
    if length_field is None:
        raise TlvError("Insufficient data during TLV processing")
    length, length_octets = length_field
    if length > MAX_NDN_PACKET_SIZE:
        raise TlvError("TLV-LENGTH from stream exceeds limit")
    value = _read_exact(stream, length)
    if len(value) < length:
        raise TlvError("Not enough bytes from stream to fully parse TLV")
    return Block(tlv_type, value, type_octets + length_octets + value)


def encode_block(tlv_type: int, value: bytes = b"") -> bytes:
    """Encode a TLV element with minimal TYPE and LENGTH fields."""
    _check_type(tlv_type)
    value = bytes(value)
    return encode_var_number(tlv_type) + encode_var_number(len(value)) + value


def escape(data: bytes) -> str:
    """Percent-encode every byte that is not an unreserved URI character."""
    return "".join(
        chr(byte) if byte in _UNRESERVED else f"%{byte:02X}" for byte in data
    )


def type_name(tlv_type: int) -> str:
    """Return the display name of a TLV-TYPE number."""
    name = _TLV_NAMES.get(tlv_type)
    if name is not None:
        return name
    if APP_PRIVATE_BLOCK1 <= tlv_type <= 252 or tlv_type >= APP_PRIVATE_BLOCK2:
        return "UNKNOWN_APP"
    return "RESERVED"


@dataclass
class Block:
    """A TLV element: its type, its value and its wire encoding."""

    tlv_type: int
    value: bytes = b""
    wire: bytes = b""
    elements: list[Block] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self.value = bytes(self.value)
        if not self.wire:
            self.wire = encode_block(self.tlv_type, self.value)

    def wire_size(self) -> int:
        """Size of the whole element on the wire, header included."""
        return len(self.wire)

    def parse(self) -> None:
        """Decode the value as a sequence of nested TLV elements.

        Raises TlvError if the value is not such a sequence; the element
        list is then left empty.
        """
        if self.elements or not self.value:
            return
        data = self.value
        elements = []
        offset = 0
        while offset < len(data):
            start = offset
            tlv_type, offset = _decode_type(data, offset)
            length, offset = decode_var_number(data, offset)
            if length > len(data) - offset:
                raise TlvError(
                    f"TLV-LENGTH of sub-element of type {tlv_type} "
                    "exceeds TLV-VALUE boundary of parent block"
                )
            end = offset + length
            elements.append(Block(tlv_type, data[offset:end], data[start:end]))
            offset = end
        self.elements = elements