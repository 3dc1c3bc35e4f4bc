# This project was developed with assistance from AI tools.
"""Pydantic request and response models."""
