"""
Pydantic schemas for recipes and validation reports.
"""
