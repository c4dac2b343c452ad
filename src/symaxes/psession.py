# vim: set expandtab shiftwidth=4 softtabstop=4:

# === UCSF ChimeraX Copyright ===
# Copyright 2016 Regents of the University of California.
# All rights reserved.  This software provided pursuant to a
# license agreement containing restrictions on its disclosure,
# duplication and use.  For details see:
# http://www.rbvi.ucsf.edu/chimerax/docs/licensing.html
# This notice must be embedded in or attached to all copies,
# including partial copies, of the software or any revisions
# or derivations thereof.
# === UCSF ChimeraX Copyright ===

# Snapshot save/restore of places and symmetry axes as plain dictionaries

def snapshot_methods():
    from .place import Place, Places
    from .axes import SymmetryAxes
    methods = {
        Place: PlaceState,
        Places: PlacesState,
        SymmetryAxes: SymmetryAxesState,
    }
    return methods

class PlaceState:
    version = 1

    @staticmethod
    def take_snapshot(place, session = None, flags = 0):
        data = {'matrix': place.matrix,
                'version': PlaceState.version,
                }
        return data

    @staticmethod
    def restore_snapshot(session, data):
        from .place import Place
        return Place(data['matrix'])

class PlacesState:
    version = 1

    @staticmethod
    def take_snapshot(places, session = None, flags = 0):
        data = {'array': places.array(),
                'version': PlacesState.version,
                }
        return data

    @staticmethod
    def restore_snapshot(session, data):
        from .place import Places
        pa = data['array']
        from numpy import float64
        if pa.dtype != float64:
            pa = pa.astype(float64)
        return Places(place_array = pa)

class SymmetryAxesState:
    version = 1

    @staticmethod
    def take_snapshot(symmetry_axes, session = None, flags = 0):
        sa = symmetry_axes
        from numpy import array, float64, int64
        with sa._lock:
            nrep = sa.repeat_count()
            data = {'axes': array([tf.matrix for tf in sa.elementary_axes()], float64).reshape((-1,3,4)),
                    'divisions': sa.divisions(),
                    'repeat_transforms': array([sa.repeat_transform_counts(r) for r in range(nrep)],
                                               int64).reshape((nrep, sa.axis_count())),
                    'relations': [[list(l) for l in rel]
                                  for i, rel in sa.repeat_relations()],
                    'tolerance': sa.tolerance,
                    'version': SymmetryAxesState.version,
                    }
        return data

    @staticmethod
    def restore_snapshot(session, data, equivalent_axes = None):
        '''
        Rebuild the symmetry axes by adding each saved axis in hierarchy
        order.  The axis equivalence function is not saved.
        '''
        from .axes import SymmetryAxes
        from .place import Place
        sa = SymmetryAxes(equivalent_axes = equivalent_axes, tolerance = data['tolerance'])
        counts = data['repeat_transforms']
        for i, (m, division) in enumerate(zip(data['axes'], data['divisions'])):
            repeats = [int(c) for c in counts[:,i]]
            sa.add_axis(Place(m), data['relations'][i], repeats, division)
        return sa
