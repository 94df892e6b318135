from .direction import ORIGINAL


class ZipperIter(object):
    """
    Yields the elements of a zipper once each, starting at the focus and
    walking the ring in the given direction.

    The view reads through `Zipper.ith` and never moves the focus, so any
    number of views may be open over one zipper at a time. Mutating the
    zipper while a view is open invalidates the view; the next call to
    `next` raises RuntimeError.
    """

    def __init__(self, zipper, direction=ORIGINAL):
        self._zipper = zipper
        self._count = zipper.size()
        self._cursor = 0
        self._direction = direction
        self._version = zipper._version

    @property
    def direction(self):
        return self._direction

    def __iter__(self):
        return self

    def __next__(self):
        if self._zipper._version != self._version:
            raise RuntimeError('zipper changed during iteration')

        if not -self._count < self._cursor < self._count:
            raise StopIteration

        i = self._cursor
        self._cursor += self._direction.offset
        return self._zipper.ith(i)

    def __length_hint__(self):
        return self._count - abs(self._cursor)
