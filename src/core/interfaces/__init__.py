"""Core interfaces.

Protocols implemented by concrete adapters; the core depends only on these.
"""
