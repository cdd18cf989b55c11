"""
HTTP API entry point.
"""
