"""
Tests for utils.py - headings, relative actions and rotation.
"""

import os
import sys

import numpy as np
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from utils import (
    UP, RIGHT, DOWN, LEFT, DIRECTIONS,
    STRAIGHT, TURN_LEFT, TURN_RIGHT, ACTIONS,
    rotate, relative_offsets, rel_to_abs, unit, check_action, is_reversal,
)


class TestRotate:
    """Tests for rotating a heading by a relative action."""

    @pytest.mark.parametrize("direction", DIRECTIONS)
    def test_left_then_right_is_identity(self, direction):
        """A left turn followed by a right turn restores the heading."""
        assert rotate(rotate(direction, TURN_LEFT), TURN_RIGHT) == direction

    @pytest.mark.parametrize("direction", DIRECTIONS)
    def test_four_right_turns_is_identity(self, direction):
        """Four right turns come back to the starting heading."""
        d = direction
        for _ in range(4):
            d = rotate(d, TURN_RIGHT)
        assert d == direction

    @pytest.mark.parametrize("direction", DIRECTIONS)
    def test_straight_keeps_heading(self, direction):
        assert rotate(direction, STRAIGHT) == direction

    def test_cyclic_order(self):
        """Right turns follow up -> right -> down -> left."""
        assert rotate(UP, TURN_RIGHT) == RIGHT
        assert rotate(RIGHT, TURN_RIGHT) == DOWN
        assert rotate(DOWN, TURN_RIGHT) == LEFT
        assert rotate(LEFT, TURN_RIGHT) == UP
        assert rotate(UP, TURN_LEFT) == LEFT

    @pytest.mark.parametrize("action", [3, -1, "LEFT", None, 1.5, 1.0, True, np.float64(1)])
    def test_invalid_action_raises(self, action):
        with pytest.raises(ValueError):
            rotate(UP, action)


class TestRelativeOffsets:
    """Tests for the ahead/left/right offsets of a heading."""

    def test_heading_up(self):
        assert relative_offsets(UP) == (UP, LEFT, RIGHT)

    def test_heading_right(self):
        assert relative_offsets(RIGHT) == (RIGHT, UP, DOWN)

    def test_heading_down(self):
        """Left of a downward heading is the +x side."""
        assert relative_offsets(DOWN) == (DOWN, RIGHT, LEFT)

    def test_heading_left(self):
        assert relative_offsets(LEFT) == (LEFT, DOWN, UP)


class TestHelpers:

    def test_unit(self):
        assert unit(-7) == -1
        assert unit(0) == 0
        assert unit(3) == 1

    def test_rel_to_abs(self):
        assert rel_to_abs((4, 4), LEFT) == (3, 4)
        assert rel_to_abs((4, 4), DOWN) == (4, 5)

    def test_check_action_accepts_all_actions(self):
        for action in ACTIONS:
            assert check_action(action) == action

    def test_check_action_accepts_numpy_ints(self):
        assert check_action(np.int64(TURN_RIGHT)) == TURN_RIGHT


class TestIsReversal:
    """Tests for spotting a heading that points back into the neck."""

    @pytest.mark.parametrize("direction, opposite", [(UP, DOWN), (RIGHT, LEFT), (DOWN, UP), (LEFT, RIGHT)])
    def test_opposite_is_a_reversal(self, direction, opposite):
        assert is_reversal(direction, opposite)

    def test_turns_are_not_reversals(self):
        assert not is_reversal(RIGHT, UP)
        assert not is_reversal(RIGHT, RIGHT)

    def test_two_keys_in_one_frame(self):
        """Up then left while heading right: left is checked against the frame's heading."""
        frame_direction = RIGHT
        direction = frame_direction
        for key_direction in (UP, LEFT):
            if not is_reversal(frame_direction, key_direction):
                direction = key_direction
        assert direction == UP
