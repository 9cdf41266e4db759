"""Print the TLV structure of a stream of NDN packets as a tree."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import BinaryIO, TextIO

from ndndissect.tlv import (
    CONTENT,
    INTEREST_SIGNATURE_VALUE,
    SIGNATURE_VALUE,
    Block,
    TlvError,
    escape,
    read_block,
    type_name,
)

_GLYPH_VERTICAL = "\u2502 "
_GLYPH_VERTICAL_AND_RIGHT = "\u251c\u2500"
_GLYPH_UP_AND_RIGHT = "\u2514\u2500"
_GLYPH_SPACE = "  "

_NEVER_PARSED = frozenset({SIGNATURE_VALUE, INTEREST_SIGNATURE_VALUE})


@dataclass
class Options:
    """Dissector settings."""

    dissect_content: bool = False


def _branch_prefix(branches: tuple[bool, ...]) -> str:
    """Draw the tree lines; each flag says whether more siblings follow at that level."""
    if not branches:
        return ""
    *outer, last = branches
    parts = [_GLYPH_VERTICAL if more else _GLYPH_SPACE for more in outer]
    parts.append(_GLYPH_VERTICAL_AND_RIGHT if last else _GLYPH_UP_AND_RIGHT)
    return "".join(parts)


class Dissector:
    """Reads TLV blocks from a binary stream and writes their tree to a text stream."""

    def __init__(self, input: BinaryIO, output: TextIO, options: Options) -> None:
        self._input = input
        self._output = output
        self._options = options

    def dissect(self) -> None:
        """Dissect every block until end of input, reporting errors on stderr."""
        offset = 0
        try:
            while (block := read_block(self._input)) is not None:
                self._print_tree(block)
                offset += block.wire_size()
        except (TlvError, OSError) as exc:
            print(f"ERROR: {exc} at offset {offset}", file=sys.stderr)

    def _wants_parse(self, block: Block) -> bool:
        if block.tlv_type in _NEVER_PARSED:
            return False
        return block.tlv_type != CONTENT or self._options.dissect_content

    def _print_tree(self, root: Block) -> None:
        stack: list[tuple[Block, tuple[bool, ...]]] = [(root, ())]
        while stack:
            block, branches = stack.pop()
            self._print_block(block, branches)
            last = len(block.elements) - 1
            stack.extend(
                (child, branches + (index != last,))
                for index, child in reversed(list(enumerate(block.elements)))
            )

    def _print_block(self, block: Block, branches: tuple[bool, ...]) -> None:
        if self._wants_parse(block):
            try:
                block.parse()
            except TlvError:
                pass  # a leaf: the value is not a TLV sequence
        line = (
            f"{_branch_prefix(branches)}{block.tlv_type} ({type_name(block.tlv_type)})"
            f" (size: {len(block.value)})"
        )
        if not block.elements:
            line += f" [[{escape(block.value)}]]"
        self._output.write(line + "\n")