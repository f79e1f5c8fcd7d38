"""Shared helpers for the demo services.

Both services (`demo-service` and `demo-client`) import configuration,
logging, health probe and server wiring from here so they behave the same way
when deployed side by side.
"""
