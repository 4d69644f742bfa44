"""Encoding and decoding of the spec binary value format: types, tables, encoders and decoders."""

__version__ = "0.1.0"

__all__ = ["format", "encode", "decode", "decode_compound"]