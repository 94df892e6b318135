"""
A zipper over a finite sequence, closed into a ring.

The zipper keeps the sequence split around the focused element in two
deques. `forward` holds the focus and everything after it, focus first.
`backward` holds everything before the focus, nearest first. Moving the
focus pops an element off the front of one deque and pushes it onto the
front of the other.

When the deque in the direction of travel runs dry the other one is
drained into it, reversing its order, which is what closes the sequence
into a ring: the successor of the last element is the first element and
the predecessor of the first element is the last.

    >>> z = Zipper(range(10))
    >>> str(z.refocus(lambda i: i == 5))
    '[5, 6, 7, 8, 9, 0, 1, 2, 3, 4]'
    >>> z.step_backwards().focus()
    4

"""
import copy
import logging
from collections import deque

from .direction import ORIGINAL, REVERSE
from .view import ZipperIter

log = logging.getLogger(__name__)


class ZipperInvariantError(Exception):
    def __init__(self, direction):
        msg = (
            'Cannot step {} with nothing to pop; '
            'the stacks were not rotated first'
        ).format(direction.name)
        super(ZipperInvariantError, self).__init__(msg)
        self.direction = direction


# deque -> deque -> None
def _reset(into, source):
    """
    Moves every element of source onto the front of into, one at a time.
    The elements end up in into in the reverse of their order in source.
    """
    while source:
        into.appendleft(source.popleft())


# deque -> deque -> None
def _pop_push(source, into):
    into.appendleft(source.popleft())


class Zipper(object):
    """
    A cursor over a sequence that can move in both directions forever.

    Build one from any finite iterable; the first element is focused:

        >>> z = Zipper('abc')
        >>> z.focus()
        'a'
        >>> z.step_backwards().focus()
        'c'

    Every query that needs a focus returns None on an empty zipper.
    """

    __hash__ = None

    def __init__(self, iterable=()):
        self.forward = deque(iterable)
        self.backward = deque()
        self._version = 0

    @classmethod
    def from_iterable(cls, iterable):
        return cls(iterable)

    def size(self):
        return len(self.forward) + len(self.backward)

    ## Navigation
    def step(self, direction):
        """
        Moves the focus one element in the given direction, wrapping round
        from the last element to the first (or the first to the last).
        """
        if not self.size():
            return self

        self._touch()
        if direction is ORIGINAL:
            return self._advance_focus(direction)._rotate_stacks(direction)
        else:
            return self._rotate_stacks(direction)._advance_focus(direction)

    def step_forwards(self):
        return self.step(ORIGINAL)

    def step_backwards(self):
        return self.step(REVERSE)

    def reset_start(self):
        """Focuses the first element of the source sequence."""
        self._touch()
        _reset(self.forward, self.backward)
        return self

    def reset_end(self):
        """Focuses the last element of the source sequence."""
        # draining leaves nothing focused; the reverse step restores a focus
        return self._reset_end().step(REVERSE)

    def _reset_end(self):
        self._touch()
        _reset(self.backward, self.forward)
        return self

    def _advance_focus(self, direction):
        if direction is ORIGINAL:
            source, into = self.forward, self.backward
        else:
            source, into = self.backward, self.forward

        if not source:
            log.error('no element to pop stepping %s', direction.name)
            raise ZipperInvariantError(direction)

        _pop_push(source, into)
        return self

    def _rotate_stacks(self, direction):
        if direction is ORIGINAL and not self.forward:
            log.debug('wrapping to the start of %d elements', self.size())
            return self.reset_start()
        elif direction is REVERSE and not self.backward:
            log.debug('wrapping to the end of %d elements', self.size())
            return self._reset_end()
        return self

    ## Search
    def refocus(self, predicate):
        """
        Steps forwards until the focused element satisfies predicate.

        The first step is always taken, so the current focus is only
        matched again after a trip around the ring. When nothing matches
        the search gives up after size + 1 steps, leaving the focus on the
        element after the one it started from.
        """
        return self._search(ORIGINAL, predicate)

    def refocus_backwards(self, predicate):
        """
        Steps backwards until the focused element satisfies predicate.

        When some element matches this lands where refocus would. When
        nothing matches it gives up on the element before the starting
        focus.
        """
        return self._search(REVERSE, predicate)

    def _search(self, direction, predicate):
        counter = 0
        while self.step(direction).size():
            if predicate(self.focus()) or counter >= self.size():
                break
            counter += 1
        return self

    ## Editing
    def focus(self):
        if self.forward:
            return self.forward[0]

    def push_focus(self, elem):
        """
        Inserts elem at the cursor. The old focus becomes the element
        following elem.
        """
        self._touch()
        self.forward.appendleft(elem)
        return self

    def take_current_focus(self):
        """
        Removes and returns the focused element. The element after it is
        focused next, wrapping to the start of the ring if needed.
        """
        if not self.forward:
            return None

        self._touch()
        elem = self.forward.popleft()
        if not self.forward:
            _reset(self.forward, self.backward)
        return elem

    def take_previous_focus(self):
        """Removes and returns the element before the focus."""
        if not self.size():
            return None

        self._touch()
        if not self.backward:
            _reset(self.backward, self.forward)
        elem = self.backward.popleft()
        if not self.forward:
            _reset(self.forward, self.backward)
        return elem

    def drain(self):
        """
        Takes every element out of the zipper, starting at the focus and
        following the ring forwards.
        """
        while self.size():
            yield self.take_current_focus()

    ## Enumeration
    def iter(self):
        return ZipperIter(self, ORIGINAL)

    def reverse_iter(self):
        return ZipperIter(self, REVERSE)

    def ith(self, i):
        """
        Returns the element i steps away from the focus: forwards for a
        positive i, backwards for a negative one. Offsets wrap round the
        ring, so ith(0) is the focus and ith(size()) is too.
        """
        count = self.size()
        if not count:
            return None

        i = i % count
        fw_len = len(self.forward)
        if i < fw_len:
            return self.forward[i]
        return self.backward[len(self.backward) - (i - fw_len + 1)]

    def copy(self):
        return copy.copy(self)

    def _touch(self):
        self._version += 1

    def __copy__(self):
        z = type(self)()
        z.forward = deque(self.forward)
        z.backward = deque(self.backward)
        return z

    def __len__(self):
        return self.size()

    def __iter__(self):
        return self.iter()

    def __reversed__(self):
        return self.reverse_iter()

    def __getitem__(self, i):
        if not isinstance(i, int):
            raise TypeError(
                'zipper indices must be integers, not {}'.format(
                    type(i).__name__,
                ),
            )
        if not self.size():
            raise IndexError('index into an empty zipper')
        return self.ith(i)

    def __eq__(self, other):
        if not isinstance(other, Zipper):
            return NotImplemented
        return (
            self.forward == other.forward and
            self.backward == other.backward
        )

    def __str__(self):
        return '[{}]'.format(', '.join(str(e) for e in self.iter()))

    def __repr__(self):
        fmt = '<ringzipper.Zipper(forward={}, backward={}) object at {}>'
        return fmt.format(
            list(self.forward), list(self.backward), id(self),
        )
