"""Shared model base classes."""

from .base import ZmkViewBaseModel


__all__ = ["ZmkViewBaseModel"]
