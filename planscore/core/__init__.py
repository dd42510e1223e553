"""
Core module - settings, logging and exception types shared by all layers.
"""
