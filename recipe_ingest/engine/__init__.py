"""
Recipe parsing, classification and validation engine.
"""
