# tests/test_heading.py
import pytest
from core.interfaces import Heading

def test_opposites_are_symmetric():
    assert Heading.UP.opposite() is Heading.DOWN
    assert Heading.LEFT.opposite() is Heading.RIGHT
    for h in Heading:
        assert h.opposite().opposite() is h
        assert h.opposite() is not h

def test_offsets_follow_screen_axes():
    assert Heading.UP.offset((3, 3)) == (3, 2)
    assert Heading.DOWN.offset((3, 3)) == (3, 4)
    assert Heading.LEFT.offset((3, 3)) == (2, 3)
    assert Heading.RIGHT.offset((3, 3)) == (4, 3)

def test_from_name_is_case_insensitive():
    assert Heading.from_name("up") is Heading.UP
    assert Heading.from_name("Right") is Heading.RIGHT

def test_from_name_rejects_unknown():
    with pytest.raises(ValueError, match="Unknown heading"):
        Heading.from_name("north")
