"""
HTTP API for terrain mesh generation.
"""
