from ._lib.direction import ORIGINAL, REVERSE, Direction
from ._lib.view import ZipperIter
from ._lib.zipper import Zipper, ZipperInvariantError

__all__ = [
    'Direction',
    'ORIGINAL',
    'REVERSE',
    'Zipper',
    'ZipperInvariantError',
    'ZipperIter',
]
