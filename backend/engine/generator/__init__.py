"""Diesel generator module."""

from .diesel_generator import DieselGenerator

__all__ = ["DieselGenerator"]
