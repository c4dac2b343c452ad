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
place: Rigid body transforms
============================

A symmetry axis is represented by a Place object, a rotation followed by
a shift, stored as a 3 by 4 float64 matrix.  Multiplying two places
composes the transforms acting in right to left order, so (a * b) * xyz
applies b first and a last.

Points are one-dimensional arrays of 3 values, and multiple points are
N by 3 numpy arrays.
'''

from . import matrix as m34


class Place:
    '''
    Rigid transform of a repeat or symmetry axis.  The transform can be
    given as a 3 by 4 array, the first 3 columns being the rotation and the
    last column the shift, or as a 4 by 4 homogeneous matrix whose last row
    is ignored.  With no matrix the transform is the identity, shifted by
    origin if given.
    '''
    def __init__(self, matrix=None, origin=None):
        from numpy import array
        if matrix is None:
            m = m34.identity_matrix()
            if origin is not None:
                m[:, 3] = origin
        else:
            m = m34.matrix_34(matrix)
            if m is None:
                raise ValueError('Place matrix must be 3 by 4 or 4 by 4, got shape %s'
                                 % str(array(matrix).shape))

        self._matrix = m
        self._is_identity = None # Cached boolean value whether matrix is identity
        self._inverse = None    # Cached inverse.

    def copy(self):
        return Place(self._matrix)

    @property
    def matrix(self):
        '''Returns a copy of the 3x4 float64 transformation matrix as a numpy array.'''
        return self._matrix.copy()

    def __eq__(self, p):
        '''Are matrix values of this Place equal to matrix values of another Place.'''
        if not isinstance(p, Place):
            return NotImplemented
        from numpy import array_equal
        return p is self or array_equal(p._matrix, self._matrix)

    __hash__ = None

    def __repr__(self):
        return 'Place(%s)' % repr(self._matrix.tolist())

    def __mul__(self, p):
        '''
        Place times Place composes the transforms, the right one applied
        first.  Place times points (numpy array, tuple, list or tinyarray)
        returns the transformed points as a numpy array.
        '''
        if isinstance(p, Place):
            return Place(m34.multiply_matrices(self._matrix, p._matrix))

        from numpy import ndarray
        if isinstance(p, (ndarray, tuple, list)):
            return m34.apply_matrix(self._matrix, p)

        from tinyarray import ndarray_int, ndarray_float
        if isinstance(p, (ndarray_float, ndarray_int)):
            return m34.apply_matrix(self._matrix, p)

        raise TypeError('Cannot multiply Place times "%s"' % str(p))

    def power(self, n):
        '''
        Return this transform applied n times.  A power of 0 gives the
        identity and 1 gives a copy of this transform.
        '''
        if n < 0:
            raise ValueError('Place power must be non-negative, got %d' % n)
        if n == 0:
            return Place()
        p = self.copy()
        for i in range(1, n):
            p = p * self
        return p

    def inverse(self):
        '''Return the inverse transform.'''
        if self._inverse is None:
            self._inverse = Place(m34.invert_matrix(self._matrix))
        return self._inverse

    def rotation_axis_and_angle(self):
        '''Return the rotation axis and angle (degrees) of the transform.'''
        return m34.rotation_axis_angle(self._matrix)

    def axis_center_angle_shift(self):
        '''
        Describe the transform as a rotation about an axis line followed by
        a shift along that line.  Return the axis direction, a point on the
        axis, the rotation angle (degrees) and the shift distance.
        '''
        return m34.axis_center_angle_shift(self._matrix)

    def translation(self):
        '''Return the transformation shift vector.'''
        return self._matrix[:, 3].copy()

    def description(self):
        '''
        Return a text description of the transformation, the 3 by 4 matrix
        and its axis, axis point, angle and shift.
        '''
        return m34.transformation_description(self._matrix)

    def is_identity(self, tolerance=0):
        '''
        Is every matrix element within tolerance of the identity transform?
        '''
        if tolerance == 0:
            ii = self._is_identity
            if ii is None:
                self._is_identity = ii = m34.is_identity_matrix(self._matrix, 0)
        else:
            ii = m34.is_identity_matrix(self._matrix, tolerance)
        return ii


def place(tf):
    '''Return tf as a Place, converting a 3x4 or 4x4 matrix if needed.'''
    if isinstance(tf, Place):
        return tf
    return Place(tf)


def translation(v):
    '''Return a transform which is a shift by vector v.'''
    return Place(origin=v)


def rotation(axis, angle, center=(0, 0, 0)):
    '''
    Return a transform which is a rotation about the specified center
    and axis by the given angle (degrees).
    '''
    return Place(m34.rotation_transform(axis, angle, center))


class Places:
    '''
    Sequence of Place transforms, for instance the transforms taking every
    repeat of a structure to the reference frame.  Built from a list of
    Place instances or from an N by 3 by 4 numpy float64 array.
    '''
    def __init__(self, places=None, place_array=None):
        if place_array is not None:
            pl = None
            from numpy import ndarray, float64
            if not isinstance(place_array, ndarray) or place_array.dtype != float64:
                raise ValueError('Places place_array argument must be a float64 numpy array')
        else:
            pl = [] if places is None else list(places)
        self._place_list = pl
        self._place_array = place_array

    def place_list(self):
        '''Return a list of Place instances.'''
        pl = self._place_list
        if pl is None:
            pl = [Place(m) for m in self._place_array]
            self._place_list = pl
        return pl

    def array(self):
        '''Return a numpy float64 N x 3 x 4 array.'''
        pa = self._place_array
        if pa is None:
            from numpy import empty, float64
            pa = empty((len(self),3,4), float64)
            for i,p in enumerate(self._place_list):
                pa[i,:,:] = p._matrix
            self._place_array = pa
        return pa

    def __getitem__(self, i):
        return self.place_list()[i]

    def __len__(self):
        if self._place_list is not None:
            return len(self._place_list)
        return len(self._place_array)

    def __iter__(self):
        return iter(self.place_list())

    def __eq__(self, p):
        '''Same number of places with equal matrices in the same order.'''
        if p is self:
            return True
        if not isinstance(p, Places) or len(p) != len(self):
            return False
        for p0,p1 in zip(self, p):
            if p1 != p0:
                return False
        return True

    __hash__ = None
