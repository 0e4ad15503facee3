"""Outbound HTTP clients used by the user service."""
