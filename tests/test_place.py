import numpy
import pytest

from symaxes import Place, Places, rotation, translation


def test_identity():
    assert Place().is_identity()
    assert not translation((1, 0, 0)).is_identity()


def test_rotation_moves_point():
    r = rotation((0, 0, 1), 90)
    p = r * numpy.array((1.0, 0, 0))
    assert numpy.allclose(p, (0, 1, 0))


def test_rotation_about_center():
    r = rotation((0, 0, 1), 180, center=(1, 0, 0))
    assert numpy.allclose(r * numpy.array((0.0, 0, 0)), (2, 0, 0))


def test_multiply_applies_right_first():
    r = rotation((0, 0, 1), 90)
    t = translation((1, 0, 0))
    p = numpy.array((0.0, 0, 0))
    assert numpy.allclose((r * t) * p, (0, 1, 0))
    assert numpy.allclose((t * r) * p, (1, 0, 0))


def test_tinyarray_point():
    import tinyarray
    r = rotation((0, 0, 1), 90)
    assert numpy.allclose(r * tinyarray.array((1.0, 0.0, 0.0)), (0, 1, 0))


def test_bad_multiply():
    with pytest.raises(TypeError):
        Place() * 'abc'


def test_power():
    r = rotation((0, 0, 1), 30)
    assert r.power(0).is_identity()
    assert r.power(1) == r
    assert r.power(1) is not r
    assert r.power(3) == (r * r) * r
    assert numpy.allclose(r.power(3).matrix, rotation((0, 0, 1), 90).matrix)
    with pytest.raises(ValueError):
        r.power(-1)


def test_inverse():
    r = rotation((1, 1, 0), 40, center=(3, 2, 1))
    assert (r * r.inverse()).is_identity(tolerance=1e-12)


def test_matrix_shapes():
    r = rotation((0, 1, 0), 60)
    m44 = numpy.identity(4)
    m44[:3, :] = r.matrix
    assert Place(m44) == r
    with pytest.raises(ValueError):
        Place(numpy.zeros((3, 3)))


def test_rotation_axis_and_angle():
    axis, angle = rotation((0, 0, 1), 72).rotation_axis_and_angle()
    assert numpy.allclose(axis, (0, 0, 1))
    assert angle == pytest.approx(72)


def test_half_turn_axis():
    axis, angle = rotation((0, 1, 0), 180).rotation_axis_and_angle()
    assert numpy.allclose(axis, (0, 1, 0))
    assert angle == pytest.approx(180)


def test_axis_center_angle_shift():
    tf = translation((0, 0, 2)) * rotation((0, 0, 1), 90, center=(1, 0, 0))
    axis, point, angle, shift = tf.axis_center_angle_shift()
    assert numpy.allclose(axis, (0, 0, 1))
    assert numpy.allclose(point[:2], (1, 0))
    assert angle == pytest.approx(90)
    assert shift == pytest.approx(2)


def test_description():
    text = rotation((0, 0, 1), 90).description()
    assert 'Rotation angle (degrees)  90.00000000' in text


def test_places():
    a = rotation((1, 0, 0), 90)
    b = translation((0, 0, 1))
    pl = Places([a, b])
    assert len(pl) == 2
    assert pl.array().shape == (2, 3, 4)
    assert pl[1] == b
    assert list(pl) == [a, b]
    assert Places(place_array=pl.array()) == pl
    assert pl != Places([b, a])
    assert len(Places()) == 0


def test_places_array_type():
    with pytest.raises(ValueError):
        Places(place_array=numpy.zeros((1, 3, 4), numpy.float32))
