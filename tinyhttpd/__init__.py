"""A minimal loopback HTTP request listener, with an HTTP request-head parser, a flag-style argument parser and small helpers."""

__version__ = "0.1.0"