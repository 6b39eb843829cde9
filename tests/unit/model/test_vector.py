import math

import numpy as np
import pytest
from attr.exceptions import FrozenInstanceError

from shred.model.vector import ZERO, Vector2


class TestVector2:
    @staticmethod
    def test_arithmetic():
        vector = Vector2(3, 4)
        assert vector.x == 3.0
        assert isinstance(vector.x, float)
        assert vector + Vector2(1, 1) == Vector2(4, 5)
        assert vector - Vector2(1, 1) == Vector2(2, 3)
        assert vector * 2 == Vector2(6, 8)
        assert 2 * vector == Vector2(6, 8)
        assert vector / 2 == Vector2(1.5, 2)
        assert -vector == Vector2(-3, -4)
        assert vector.magnitude == 5.0
        assert vector.distance(ZERO) == 5.0
        assert ZERO == Vector2()
        with pytest.raises(FrozenInstanceError):
            vector.x = 1.0  # type: ignore

    @staticmethod
    def test_polar():
        vector = Vector2.from_polar(2, math.pi / 2)
        assert vector.equals_epsilon(Vector2(0, 2), 1e-12)
        assert not vector.equals_epsilon(Vector2(0, 2.1), 0.01)
        assert vector.angle == pytest.approx(math.pi / 2)
        assert Vector2(-1, 0).angle == pytest.approx(math.pi)

    @staticmethod
    def test_repr_and_array():
        vector = Vector2(1.5, -2)
        assert repr(vector) == "Vector2(1.5, -2)"
        np.testing.assert_array_equal(vector.to_array(), [1.5, -2.0])
        assert len({Vector2(1, 2), Vector2(1.0, 2.0)}) == 1
