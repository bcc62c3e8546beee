"""Relay BLE UUIDs between peers over UDP broadcast, with BLE UUID, HCI socket and HCI command helpers."""

__version__ = "0.1.0"