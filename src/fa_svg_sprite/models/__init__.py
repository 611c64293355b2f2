"""Pydantic models for icons, sprites and configuration."""
