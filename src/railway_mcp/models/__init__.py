"""Pydantic models for tool metadata."""
