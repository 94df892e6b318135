from ringzipper import Zipper


def test_push_focus_at_start(digits):
    digits.push_focus(42)
    assert digits.focus() == 42
    assert digits.size() == 11
    assert str(digits) == '[42, 0, 1, 2, 3, 4, 5, 6, 7, 8, 9]'
    assert digits.step_forwards().focus() == 0


def test_push_focus_in_the_middle(digits):
    digits.refocus(lambda i: i == 5).push_focus(42)
    assert list(digits) == [42, 5, 6, 7, 8, 9, 0, 1, 2, 3, 4]
    assert digits.step_backwards().focus() == 4


def test_push_focus_on_empty(empty):
    assert empty.push_focus('a').focus() == 'a'
    assert empty.size() == 1


def test_take_current_focus_until_empty():
    z = Zipper([0, 1, 2])
    assert z.take_current_focus() == 0
    assert z.size() == 2
    assert z.take_current_focus() == 1
    assert z.size() == 1
    assert z.take_current_focus() == 2
    assert z.size() == 0
    assert z.take_current_focus() is None
    assert z.focus() is None


def test_take_current_focus_at_end_wraps(digits):
    digits.reset_end()
    assert digits.take_current_focus() == 9
    assert digits.focus() == 0
    assert str(digits) == '[0, 1, 2, 3, 4, 5, 6, 7, 8]'


def test_take_previous_focus(digits):
    digits.refocus(lambda i: i == 5)
    assert digits.take_previous_focus() == 4
    assert digits.focus() == 5
    assert list(digits) == [5, 6, 7, 8, 9, 0, 1, 2, 3]
    assert digits.take_previous_focus() == 3


def test_take_previous_focus_at_start_wraps(digits):
    assert digits.take_previous_focus() == 9
    assert digits.focus() == 0
    assert str(digits) == '[0, 1, 2, 3, 4, 5, 6, 7, 8]'
    assert digits.take_previous_focus() == 8
    assert digits.focus() == 0


def test_take_previous_focus_single_and_empty():
    z = Zipper([7])
    assert z.take_previous_focus() == 7
    assert z.size() == 0
    assert z.take_previous_focus() is None


def test_drain_follows_ring_from_focus(digits):
    digits.refocus(lambda i: i == 5)
    assert list(digits.drain()) == [5, 6, 7, 8, 9, 0, 1, 2, 3, 4]
    assert digits.size() == 0


def test_drain_keeps_none_elements():
    assert list(Zipper([None, 1, None]).drain()) == [None, 1, None]


def test_drain_empty(empty):
    assert list(empty.drain()) == []
