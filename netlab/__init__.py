"""Networking tools: Go-Back-N over UDP with CRC-checked packets, a lossy UDP forwarder and remote uptime."""

__version__ = "0.1.0"