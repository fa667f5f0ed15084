"""Typeclass utilities for ad-hoc polymorphism."""

from klaw_sampling.typeclass.core import NoInstanceError, TypeClass, typeclass

__all__ = [
    'NoInstanceError',
    'TypeClass',
    'typeclass',
]
