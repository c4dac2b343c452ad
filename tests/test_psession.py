import numpy

from symaxes import Place, Places, SymmetryAxes, rotation, translation
from symaxes.psession import PlaceState, PlacesState, SymmetryAxesState, snapshot_methods


def test_place_snapshot():
    p = rotation((1, 2, 3), 33, center=(1, 0, 0))
    data = PlaceState.take_snapshot(p)
    assert data['version'] == PlaceState.version
    assert PlaceState.restore_snapshot(None, data) == p


def test_places_snapshot():
    pl = Places([rotation((0, 0, 1), 90), translation((1, 2, 3))])
    data = PlacesState.take_snapshot(pl)
    data['array'] = data['array'].astype(numpy.float32)
    restored = PlacesState.restore_snapshot(None, data)
    assert len(restored) == 2
    assert numpy.allclose(restored.array(), pl.array())


def test_symmetry_axes_snapshot(four_repeats):
    sa = four_repeats
    data = SymmetryAxesState.take_snapshot(sa)
    assert data['axes'].shape == (2, 3, 4)
    assert data['repeat_transforms'].shape == (4, 2)
    restored = SymmetryAxesState.restore_snapshot(None, data)
    assert restored.elementary_axes() == sa.elementary_axes()
    assert restored.divisions() == sa.divisions()
    assert restored.tolerance == sa.tolerance
    for r in range(4):
        assert restored.repeat_transform_counts(r) == sa.repeat_transform_counts(r)
        assert restored.repeat_transform(r) == sa.repeat_transform(r)
    for i in range(2):
        assert restored.repeat_relation(i) == sa.repeat_relation(i)


def test_empty_snapshot():
    data = SymmetryAxesState.take_snapshot(SymmetryAxes())
    restored = SymmetryAxesState.restore_snapshot(None, data)
    assert restored.axis_count() == 0
    assert restored.repeat_count() == 0


def test_snapshot_methods():
    methods = snapshot_methods()
    assert methods[Place] is PlaceState
    assert methods[SymmetryAxes] is SymmetryAxesState
