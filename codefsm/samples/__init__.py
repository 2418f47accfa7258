"""
Sample configurations built on the public API.
"""
