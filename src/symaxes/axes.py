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

'''
axes: Hierarchical symmetry axes
================================

The symmetry of a structure made of repeats is described by a small set of
elementary axes, each a rigid transform, ordered from the most global
(index 0) to the most local.  Every repeat records how many times each
axis must be applied to it, and every axis records which repeats were
superposed onto which to compute it.  From that the transform taking any
repeat to the reference repeat and the full set of symmetry axes of the
structure are composed.

Example, a 4 repeat structure with two nested 2-fold axes::

    sa = SymmetryAxes()
    sa.add_axis(rotation((0,0,1), 180), [[0, 1], [2, 3]], [0, 0, 1, 1], 2)
    sa.add_axis(rotation((1,0,0), 180), [[0, 2], [1, 3]], [0, 1, 0, 1], 2)
    tf = sa.repeat_transform(3)
    axes = sa.symmetry_axes()
'''

import logging
from numbers import Integral
from threading import RLock

from sortedcontainers import SortedDict

from .errors import InvalidArgumentError, SymmetryIndexError
from .place import Place, Places, place
from . import equivalence

_log = logging.getLogger(__name__)

MIN_DIVISION = 2
EQUIVALENCE_TOLERANCE = 0.1

def _transform(tf):
    try:
        return place(tf)
    except ValueError as e:
        raise InvalidArgumentError(str(e))

def _check_division(division):
    if not isinstance(division, Integral):
        raise InvalidArgumentError('Symmetry axis division must be an integer, got %s' % str(division))
    if division < MIN_DIVISION:
        raise InvalidArgumentError('Symmetry axis division too small: %d, must be at least %d'
                                   % (division, MIN_DIVISION))

class ElementaryAxis:
    '''A rigid transform and the number of parts it divides its scope into.'''

    def __init__(self, transform, division):
        self.transform = transform
        self.division = division

    def __repr__(self):
        return 'ElementaryAxis(division=%d, %s)' % (self.division, repr(self.transform))

class RepeatRelation(tuple):
    '''
    Pair of equal length lists of repeat indices.  Superposing the repeats
    in the first list onto the repeats in the second list, matched by
    position, gives the axis transform.
    '''

    def __new__(cls, first, second):
        return tuple.__new__(cls, (list(first), list(second)))

    @property
    def first(self):
        return self[0]

    @property
    def second(self):
        return self[1]

class AxisRegistry:
    '''
    Append only list of elementary axes.  The index of an axis is its
    position in the hierarchy and never changes.
    '''

    def __init__(self):
        self._axes = []

    def add_axis(self, transform, division):
        _check_division(division)
        self._axes.append(ElementaryAxis(transform, int(division)))
        return len(self._axes) - 1

    def update_axis(self, index, transform):
        self._check_index(index)
        self._axes[index].transform = transform

    def axis_count(self):
        return len(self._axes)

    __len__ = axis_count

    def axis_at(self, index):
        self._check_index(index)
        return self._axes[index]

    def __iter__(self):
        return iter(self._axes)

    def transforms(self):
        return [a.transform for a in self._axes]

    def divisions(self):
        return [a.division for a in self._axes]

    def _check_index(self, index):
        if not isinstance(index, Integral) or index < 0 or index >= len(self._axes):
            raise SymmetryIndexError('No symmetry axis with index %s, have %d axes'
                                 % (str(index), len(self._axes)))

class RepeatTransformTable:
    '''
    Number of times each axis is applied to each repeat.  Rows are repeats,
    columns are axes, and cells default to 0.  Rows and columns only grow.
    '''

    def __init__(self):
        self._rows = []
        self._columns = 0

    def repeat_count(self):
        return len(self._rows)

    def column_count(self):
        return self._columns

    def ensure_repeat_count(self, n):
        '''Add zero filled rows until there are at least n.'''
        while len(self._rows) < n:
            self._rows.append([0] * self._columns)

    def grow_columns(self, count):
        '''Append zeros to every row until rows have count entries.'''
        if count > self._columns:
            extra = count - self._columns
            for row in self._rows:
                row.extend([0] * extra)
            self._columns = count

    def set_cell(self, repeat, axis_index, count):
        if count < 0:
            raise InvalidArgumentError('Repeat transform count must be non-negative, got %d' % count)
        self._check(repeat, axis_index)
        self._rows[repeat][axis_index] = count

    def cell(self, repeat, axis_index):
        self._check(repeat, axis_index)
        return self._rows[repeat][axis_index]

    def row(self, repeat):
        self._check(repeat, 0 if self._columns else None)
        return tuple(self._rows[repeat])

    def rows(self):
        return [tuple(r) for r in self._rows]

    def _check(self, repeat, axis_index):
        if not isinstance(repeat, Integral) or repeat < 0 or repeat >= len(self._rows):
            raise SymmetryIndexError('No repeat with index %s, have %d repeats'
                                 % (str(repeat), len(self._rows)))
        if axis_index is not None and (axis_index < 0 or axis_index >= self._columns):
            raise SymmetryIndexError('No symmetry axis column %d, have %d axes'
                                 % (axis_index, self._columns))

class RepeatRelationIndex:
    '''Repeat relation for each axis index, iterated in hierarchy order.'''

    def __init__(self):
        self._relations = SortedDict()

    def set_relation(self, axis_index, relation):
        self._relations[axis_index] = relation

    def relation_for(self, axis_index):
        return self._relations.get(axis_index)

    def relations(self):
        return list(self._relations.items())


class TransformComposer:
    '''Composes the transform taking a repeat to the reference frame.'''

    def __init__(self, registry, table):
        self._registry = registry
        self._table = table

    def repeat_transform(self, repeat):
        row = self._table.row(repeat)
        # Powers in hierarchy order, global first.
        powers = []
        for axis, count in zip(self._registry, row):
            if count > 0:
                powers.append(axis.transform.power(count))
        # Multiply in reverse order so the global axis is applied first.
        transform = Place()
        for p in reversed(powers):
            transform = transform * p
        return transform

class SymmetryAxisDeriver:
    '''
    Derives one symmetry axis per repeat by combining the elementary axes
    applied to that repeat, then makes equivalent axes share a value.
    '''

    def __init__(self, registry, table, equivalent_axes, tolerance):
        self._registry = registry
        self._table = table
        self.equivalent_axes = equivalent_axes
        self.tolerance = tolerance

    def symmetry_axes(self):
        axes = self._registry.transforms()
        symm_axes = []
        for row in self._table.rows():
            axis = Place()
            ident = True
            # Local axes first.
            for t in range(len(row)-1, -1, -1):
                base = axes[t]
                invert = base.inverse()
                for n in range(row[t]):
                    if ident:
                        axis = base
                        ident = False
                    else:
                        axis = (base * axis) * invert
            if not ident:
                symm_axes.append(axis)

        # Equivalent axes keep their slot but take the later value.
        equiv = self.equivalent_axes
        tol = self.tolerance
        for a in range(len(symm_axes)):
            for b in range(a+1, len(symm_axes)):
                if equiv(symm_axes[a], symm_axes[b], tol):
                    symm_axes[a] = symm_axes[b]
        return symm_axes

class SymmetryAxes:
    '''
    All the symmetry axes describing a structure made of repeats: the
    elementary axes in hierarchy order with their divisions, the number
    of times each axis applies to each repeat, and the repeat superposition
    that gives each axis.  The axis equivalence test used when deriving
    symmetry axes can be replaced with a function taking two Place
    transforms and a tolerance.

    Mutations and queries hold a lock so a query never sees an axis
    that is only partly added.
    '''

    def __init__(self, equivalent_axes = None, tolerance = EQUIVALENCE_TOLERANCE):
        if equivalent_axes is None:
            equivalent_axes = equivalence.equivalent_axes
        self._lock = RLock()
        self._registry = AxisRegistry()
        self._table = RepeatTransformTable()
        self._relations = RepeatRelationIndex()
        self._composer = TransformComposer(self._registry, self._table)
        self._deriver = SymmetryAxisDeriver(self._registry, self._table,
                                            equivalent_axes, tolerance)

    @property
    def equivalent_axes(self):
        return self._deriver.equivalent_axes

    @property
    def tolerance(self):
        return self._deriver.tolerance

    def add_axis(self, transform, superposition, repeats, division):
        '''
        Add a new elementary axis below all existing ones in the hierarchy
        and return its index.

        The superposition is a pair of equal length lists of repeat indices,
        the repeats of the first superposed onto the second give the axis.
        Repeats gives for each repeat the number of times the axis applies
        to it; repeats beyond its length get 0.  Division is the number of
        parts the axis divides the structure into.  Nothing is changed if
        any argument is rejected.
        '''
        tf = _transform(transform)
        if len(superposition) != 2:
            raise InvalidArgumentError('Wrong superposition format: should be 2 lists, got %d'
                                       % len(superposition))
        first, second = superposition
        if len(first) != len(second):
            raise InvalidArgumentError('Wrong superposition format: lists of unequal size %d and %d'
                                       % (len(first), len(second)))
        _check_division(division)
        repeats = list(repeats)
        for c in repeats:
            if not isinstance(c, Integral) or c < 0:
                raise InvalidArgumentError('Repeat transform counts must be non-negative integers, got %s'
                                           % str(c))
        with self._lock:
            nrep = max(self._table.repeat_count(), len(repeats))
            for r in tuple(first) + tuple(second):
                if not isinstance(r, Integral) or r < 0 or r >= nrep:
                    raise InvalidArgumentError('Repeat index %s in superposition out of bounds, have %d repeats'
                                               % (str(r), nrep))

            index = self._registry.add_axis(tf, division)
            table = self._table
            table.ensure_repeat_count(len(repeats))
            table.grow_columns(index+1)
            for su, n in enumerate(repeats):
                table.set_cell(su, index, n)
            self._relations.set_relation(index, RepeatRelation(first, second))
        _log.debug('added symmetry axis %d, division %d, %d repeats', index, division, nrep)
        return index

    def update_axis(self, index, transform):
        '''Replace the transform of an existing axis, for instance after refinement.'''
        tf = _transform(transform)
        with self._lock:
            self._registry.update_axis(index, tf)
        _log.debug('updated symmetry axis %d', index)

    def recompute_axis(self, index, repeat_coords):
        '''
        Recompute an axis by superposing the coordinates of the repeats
        given by its repeat relation.  Repeat_coords is indexed by repeat
        and holds an N by 3 array for each.  Returns the rms distance of
        the superposition.
        '''
        from .align import superposition_transform
        with self._lock:
            self._registry.axis_at(index)
            relation = self._relations.relation_for(index)
            if relation is None:
                raise InvalidArgumentError('Symmetry axis %d has no repeat relation' % index)
            try:
                tf, rms = superposition_transform(relation, repeat_coords)
            except ValueError as e:
                raise InvalidArgumentError('Cannot recompute symmetry axis %d: %s' % (index, str(e)))
            self._registry.update_axis(index, tf)
        _log.debug('recomputed symmetry axis %d, rms %.3g', index, rms)
        return rms

    def axis_count(self):
        with self._lock:
            return self._registry.axis_count()

    def repeat_count(self):
        with self._lock:
            return self._table.repeat_count()

    def elementary_axes(self):
        '''
        Return the elementary axes, from which all symmetry axes are built,
        as a list of Place transforms from global to local.
        '''
        with self._lock:
            return self._registry.transforms()

    def divisions(self):
        '''Number of parts each elementary axis divides the structure into.'''
        with self._lock:
            return self._registry.divisions()

    def repeat_transform_counts(self, repeat):
        '''Number of times each axis applies to a repeat.'''
        with self._lock:
            return self._table.row(repeat)

    def repeat_relation(self, index):
        '''
        Return the pair of repeat index lists whose superposition gives
        the axis, or None if the axis is not stored.
        '''
        with self._lock:
            return self._relations.relation_for(index)

    def repeat_relations(self):
        '''List of (axis index, repeat relation) pairs in hierarchy order.'''
        with self._lock:
            return self._relations.relations()

    def repeat_transform(self, repeat):
        '''
        Return the transform that brings a repeat onto the reference
        frame so that all repeats get superimposed on the same point.
        '''
        with self._lock:
            return self._composer.repeat_transform(repeat)

    def repeat_transforms(self):
        '''Repeat transforms of all repeats as a Places.'''
        with self._lock:
            return Places([self._composer.repeat_transform(r)
                           for r in range(self._table.repeat_count())])

    def symmetry_axes(self):
        '''
        Return all symmetry axes of the structure, one for every repeat
        that any axis applies to, in repeat order.  Equivalent axes are
        given the same value, the list is not shortened.
        '''
        with self._lock:
            return self._deriver.symmetry_axes()

    def description(self):
        '''Text description of the elementary axes.'''
        with self._lock:
            lines = ['%d symmetry axes, %d repeats'
                     % (self._registry.axis_count(), self._table.repeat_count())]
            for i, axis in enumerate(self._registry):
                relation = self._relations.relation_for(i)
                lines.append('Axis %d, divides in %d' % (i, axis.division))
                if relation is not None:
                    lines.append('  Superposes repeats %s onto %s'
                                 % (','.join('%d' % r for r in relation[0]),
                                    ','.join('%d' % r for r in relation[1])))
                lines.append(axis.transform.description().rstrip('\n'))
            return '\n'.join(lines) + '\n'
