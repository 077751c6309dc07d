"""
Core utilities shared across the inventory API.

This package hosts configuration (Settings), logging setup and small helpers
for building absolute URLs from the inbound request.
"""
