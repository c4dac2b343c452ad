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

def align_points(xyz, ref_xyz):
    '''
    Computes rotation and translation to align one set of positions with another.
    The sum of the squares of the distances between corresponding positions is
    minimized.  The xyz positions are specified as n by 3 numpy arrays.
    Returns transform Place object and rms value.
    '''

    from numpy import float64
    xyz = xyz.astype(float64)
    ref_xyz = ref_xyz.astype(float64)

    center = xyz.mean(axis = 0)
    ref_center = ref_xyz.mean(axis = 0)
    if len(xyz) == 1:
        # No rotation if aligning one point.
        from numpy import array
        tf = array(((1,0,0,0),(0,1,0,0),(0,0,1,0)), float64)
        tf[:,3] = ref_center - center
    else:
        Si = xyz - center
        Sj = ref_xyz - ref_center
        from numpy import dot, transpose, trace, zeros, empty, identity
        Sij = dot(transpose(Si), Sj)
        M = zeros((4,4), float64)
        M[:3,:3] = Sij
        MT = transpose(M)
        trM = trace(M)*identity(4, float64)
        P = M + MT - 2 * trM
        P[3, 0] = P[0, 3] = M[1, 2] - M[2, 1]
        P[3, 1] = P[1, 3] = M[2, 0] - M[0, 2]
        P[3, 2] = P[2, 3] = M[0, 1] - M[1, 0]
        P[3, 3] = 0.0

        # Eigenvectors are columns, P is symmetric.
        from numpy import linalg
        evals, evecs = linalg.eigh(P)
        q = evecs[:,evals.argmax()]
        R = quaternion_rotation_matrix(q)
        tf = empty((3,4), float64)
        tf[:,:3] = R
        tf[:,3] = ref_center - dot(R,center)

    from .place import Place
    p = Place(tf)

    # Rms of the superposed points.
    d = p * xyz - ref_xyz
    from math import sqrt
    rms = sqrt((d*d).sum()/len(xyz))

    return p, rms

def quaternion_rotation_matrix(q):
    l,m,n,s = q
    l2 = l*l
    m2 = m*m
    n2 = n*n
    s2 = s*s
    lm = l*m
    ln = l*n
    ls = l*s
    ns = n*s
    mn = m*n
    ms = m*s
    m = ((l2 - m2 - n2 + s2, 2 * (lm - ns), 2 * (ln + ms)),
         (2 * (lm + ns), - l2 + m2 - n2 + s2, 2 * (mn - ls)),
         (2 * (ln - ms), 2 * (mn + ls), - l2 - m2 + n2 + s2))
    return m

def superposition_transform(relation, repeat_coords):
    '''
    Superpose the coordinates of the repeats in the first list of a repeat
    relation onto the coordinates of the repeats in the second list, matched
    by position.  Every repeat coordinate array must be N by 3 with the same N.
    Returns the transform and rms.
    '''
    first, second = relation
    if len(first) == 0:
        raise ValueError('Repeat relation has no repeats to superpose')
    from numpy import concatenate
    try:
        xyz = concatenate([repeat_coords[r] for r in first])
        ref_xyz = concatenate([repeat_coords[r] for r in second])
    except IndexError:
        raise ValueError('Repeat relation uses repeat without coordinates')
    if xyz.ndim != 2 or xyz.shape[1] != 3 or xyz.shape != ref_xyz.shape:
        raise ValueError('Repeat coordinates must be N by 3 arrays of equal size, got %s and %s'
                         % (str(xyz.shape), str(ref_xyz.shape)))
    return align_points(xyz, ref_xyz)
