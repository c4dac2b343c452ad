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
matrix: 3 by 4 transformation matrix routines
==============================================

Rigid transforms are stored as 3 by 4 numpy float64 arrays, the first
3 columns being the linear part and the last column the shift.  A 4 by 4
homogeneous matrix is accepted wherever a matrix argument is converted
with matrix_34().
'''

# -----------------------------------------------------------------------------
#
def matrix_34(m):
    '''Return a 3 by 4 float64 copy of a 3x4 or 4x4 matrix, or None if wrong shape.'''
    from numpy import array, float64
    a = array(m, float64)
    if a.shape == (4, 4):
        a = a[:3, :].copy()
    elif a.shape != (3, 4):
        return None
    return a

# -----------------------------------------------------------------------------
#
def apply_matrix(tf, points):

    from numpy import array, transpose, add
    from numpy import dot as matrix_multiply
    tf = array(tf)
    r = matrix_multiply(points, transpose(tf[:,:3]))
    add(r, tf[:,3], r)
    return r

# -----------------------------------------------------------------------------
#
def identity_matrix():

    from numpy import array, float64
    return array(((1,0,0,0), (0,1,0,0), (0,0,1,0)), float64)

# -----------------------------------------------------------------------------
#
def translation_matrix(shift):

    tf = identity_matrix()
    tf[:,3] = shift
    return tf

# -----------------------------------------------------------------------------
#
def is_identity_matrix(tf, tolerance = 1e-6):

    from numpy import abs as absolute
    return bool((absolute(tf - identity_matrix()) <= tolerance).all())

# -----------------------------------------------------------------------------
# Product of matrices applied right to left.
#
def multiply_matrices(*tf_list):

    if len(tf_list) == 2:
        tf1, tf2 = tf_list
        r1 = tf1[:,:3]
        t1 = tf1[:,3]
        r2 = tf2[:,:3]
        t2 = tf2[:,3]
        from numpy import zeros, float64, add
        from numpy import dot as matrix_multiply
        tf = zeros((3,4), float64)
        r = tf[:,:3]
        t = tf[:,3]
        r[:] = matrix_multiply(r1, r2)
        t[:] = add(t1, matrix_multiply(r1, t2))
    else:
        tf = multiply_matrices(*tf_list[1:])
        tf = multiply_matrices(tf_list[0], tf)
    return tf

# -----------------------------------------------------------------------------
#
def invert_matrix(tf):

    from numpy import array, zeros, float64
    tf = array(tf)
    r = tf[:,:3]
    t = tf[:,3]
    tfinv = zeros((3,4), float64)
    rinv = tfinv[:,:3]
    tinv = tfinv[:,3]
    from numpy.linalg import inv as matrix_inverse
    from numpy import dot as matrix_multiply
    rinv[:,:] = matrix_inverse(r)
    tinv[:] = matrix_multiply(rinv, -t)
    return tfinv

# -----------------------------------------------------------------------------
#
def inner_product(u,v):

    return u[0]*v[0] + u[1]*v[1] + u[2]*v[2]

# -----------------------------------------------------------------------------
#
def cross_product(u,v):

    return (u[1]*v[2]-u[2]*v[1],
            u[2]*v[0]-u[0]*v[2],
            u[0]*v[1]-u[1]*v[0])

# -----------------------------------------------------------------------------
#
def norm(u):
    '''Return the length of a vector.'''
    import math
    return math.sqrt(sum(x*x for x in u))

# -----------------------------------------------------------------------------
#
def normalize_vector(v):

    d = norm(v)
    if d == 0:
        return tuple(v)
    return tuple(x/d for x in v)

# -----------------------------------------------------------------------------
# Angle is in degrees.
#
def rotation_transform(axis, angle, center = (0,0,0)):

    axis = normalize_vector(axis)

    from math import pi, sin, cos

    arad = angle*pi/180.0
    sa = sin(arad)
    ca = cos(arad)
    k = 1 - ca
    ax, ay, az = axis
    from numpy import array, float64
    tf = array(((1 + k*(ax*ax-1), -az*sa+k*ax*ay, ay*sa+k*ax*az, 0),
                (az*sa+k*ax*ay, 1 + k*(ay*ay-1), -ax*sa+k*ay*az, 0),
                (-ay*sa+k*ax*az, ax*sa+k*ay*az, 1 + k*(az*az-1), 0)), float64)
    c_tf = translation_matrix(center)
    inv_c_tf = translation_matrix([-x for x in center])
    rtf = multiply_matrices(c_tf, tf, inv_c_tf)
    return rtf

# -----------------------------------------------------------------------------
#
def rotation_axis_angle(r):

    axis, angle = R_to_axis_angle(r)
    return axis, angle

def R_to_axis_angle(matrix):
    """Convert the rotation part of a matrix to axis-angle notation.

    Conversion equations
    ====================

    From Wikipedia (http://en.wikipedia.org/wiki/Rotation_matrix), the conversion is given by::

        x = Qzy-Qyz
        y = Qxz-Qzx
        z = Qyx-Qxy
        r = hypot(x,hypot(y,z))
        t = Qxx+Qyy+Qzz
        theta = atan2(r,t-1)

    For a near half turn x, y and z nearly vanish and the axis is taken
    from the symmetric part (Q + Q^T)/4 + I/2 = a a^T instead.

    @param matrix:  3x3 rotation, or 3x4 transform whose shift is ignored.
    @return:    The 3D unit rotation axis and angle in degrees, 0 to 180.
    """

    from numpy import array, zeros, hypot, float64, sqrt, argmax, identity
    from math import atan2, pi
    axis = zeros(3, float64)
    matrix = array(matrix, float64)
    axis[0] = matrix[2,1] - matrix[1,2]
    axis[1] = matrix[0,2] - matrix[2,0]
    axis[2] = matrix[1,0] - matrix[0,1]

    r = hypot(axis[0], hypot(axis[1], axis[2]))
    t = matrix[0,0] + matrix[1,1] + matrix[2,2]
    theta = atan2(r, t-1)
    if r < 1e-6:
        if t > 1:
            return array((0,0,1), float64), 0
        # Near half turn.
        q = matrix[:3,:3]
        aat = 0.25 * (q + q.transpose()) + 0.5 * identity(3)
        k = argmax(aat.diagonal())
        a = aat[:,k] / sqrt(aat[k,k])
        if (a*axis).sum() < 0:
            a = -a
        return a, theta*180/pi

    axis = axis / r
    return axis, theta*180/pi

# -----------------------------------------------------------------------------
# Determine the rotation axis, point on axis, rotation angle, and shift along
# the rotation axis that describes a transform.
#
def axis_center_angle_shift(tf):

    axis, angle = R_to_axis_angle(tf)
    t = [r[3] for r in tf]
    axt = cross_product(axis, t)
    axaxt = cross_product(axis, axt)
    from math import pi, cos, sin
    a2 = 0.5 * angle * pi / 180         # Half angle in radians
    try:
        ct2 = cos(a2) / sin(a2)
    except ZeroDivisionError:
        ct2 = None    # Identity rotation
    if ct2 is None:
        axis_point = (0,0,0)
    else:
        axis_point = tuple(.5*ct2*a - .5*b for a,b in zip(axt, axaxt))
    shift = inner_product(axis, t)

    return axis, axis_point, angle, shift

# -----------------------------------------------------------------------------
# Return new axis point on axis with coordinate equal to zero for the largest
# magnitude component of the axis vector.
#
def axis_point_adjust(axis_point, axis):

    a = sorted((abs(c),k) for c,k in zip(axis, range(3)))[-1][1]
    f = -axis_point[a]/axis[a]
    ap = tuple(b+f*c for b,c in zip(axis_point, axis))
    return ap

# -----------------------------------------------------------------------------
#
def transformation_description(tf):

    axis, axis_point, angle, axis_shift = axis_center_angle_shift(tf)
    axis_point = axis_point_adjust(axis_point, axis)

    message = ('  Matrix rotation and translation\n' +
               '   %12.8f %12.8f %12.8f %12.8f\n' % tuple(tf[0]) +
               '   %12.8f %12.8f %12.8f %12.8f\n' % tuple(tf[1]) +
               '   %12.8f %12.8f %12.8f %12.8f\n' % tuple(tf[2]) +
               '  Axis %12.8f %12.8f %12.8f\n' % tuple(axis) +
               '  Axis point %12.8f %12.8f %12.8f\n' % tuple(axis_point) +
               '  Rotation angle (degrees) %12.8f\n' % (angle,) +
               '  Shift along axis %12.8f\n' % (axis_shift,))
    return message

