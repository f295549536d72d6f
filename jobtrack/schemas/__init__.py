"""
Schemas Package

Pydantic request/response models.
"""
