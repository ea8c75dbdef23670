"""CIP data types, EPATH and Message Router encoding, Forward Open payloads, and CIP objects."""

__version__ = "0.1.0"