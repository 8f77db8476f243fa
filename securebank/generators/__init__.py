"""Faker-backed generators for demo data."""

from securebank.generators.account import DemoAccountGenerator

__all__ = ["DemoAccountGenerator"]
