"""Configuration for feedwatch."""

from .settings import Config

__all__ = ["Config"]
