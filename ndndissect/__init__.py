"""Dissect NDN TLV packets into a readable tree: TLV primitives, the dissector and its command line."""

__version__ = "0.1.0"
__all__ = ["cli", "dissector", "tlv"]