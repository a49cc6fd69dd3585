"""Pydantic models for the Canvas client SDK."""

from .config import CanvasClientConfig

__all__ = ["CanvasClientConfig"]
