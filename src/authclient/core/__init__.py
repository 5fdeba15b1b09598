"""Core cross-cutting components: configuration and security helpers."""
