"""
Utility helpers (file loading).
"""
