"""Bluetooth Low Energy building blocks: UUIDs, HCI opcodes and events, L2CAP framing and ATT writing."""

__version__ = "0.1.0"