"""Adapters: outbound HTTP clients (httpx)."""
