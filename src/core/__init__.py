"""Core: configuration, domain, errors and services (no HTTP framework code)."""
