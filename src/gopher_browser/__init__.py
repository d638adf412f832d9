"""Gopher Browser - A Gopher protocol (RFC 1436) client."""

__version__ = "0.1.0"
