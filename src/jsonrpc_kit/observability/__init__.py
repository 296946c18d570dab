"""Structured tracing for handled JSON-RPC payloads."""
