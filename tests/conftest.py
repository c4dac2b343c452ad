import pytest

from symaxes import SymmetryAxes, rotation


@pytest.fixture
def rot_x90():
    return rotation((1, 0, 0), 90)


@pytest.fixture
def rot_y90():
    return rotation((0, 1, 0), 90)


@pytest.fixture
def two_fold_pair():
    # Two nested 2-fold axes that do not commute.
    a = rotation((0, 0, 1), 180, center=(1, 1, 0))
    b = rotation((1, 0, 0), 180)
    return a, b


@pytest.fixture
def four_repeats(two_fold_pair):
    '''
    Two 2-fold axes, 4 repeats with counts [0,0], [1,0], [0,1], [1,1].
    '''
    a, b = two_fold_pair
    sa = SymmetryAxes()
    sa.add_axis(a, [[0, 2], [1, 3]], [0, 1, 0, 1], 2)
    sa.add_axis(b, [[0, 1], [2, 3]], [0, 0, 1, 1], 2)
    return sa
