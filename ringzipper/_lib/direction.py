class Direction(object):
    """
    A direction of travel, relative to the order of the source sequence.
    """

    def __init__(self, name, offset):
        self.name = name
        self.offset = offset
        self.opposite = None

    def __repr__(self):
        return '<Direction {}>'.format(self.name)


ORIGINAL = Direction('ORIGINAL', 1)
REVERSE = Direction('REVERSE', -1)

ORIGINAL.opposite = REVERSE
REVERSE.opposite = ORIGINAL
