"""
HTTP API for block queries and palettes.
"""
