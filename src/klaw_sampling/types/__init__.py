"""Core types: Option, Some, Nothing, Result, Ok, Err."""

from klaw_sampling.types.option import Nothing, NothingType, Option, Some
from klaw_sampling.types.result import Err, Ok, Result

__all__ = [
    'Err',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'Some',
]
