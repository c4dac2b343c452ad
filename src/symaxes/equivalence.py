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

# -----------------------------------------------------------------------------
# Two transforms describe the same symmetry axis if they rotate by the same
# angle about the same line in space and shift by the same amount along it.
# The direction of the line is not significant, so a rotation and its inverse
# are equivalent axes.  Angles are compared in radians, the tolerance is also
# used for axis direction and axis position unless distance_tolerance is given.
#
def equivalent_axes(a, b, tolerance = 0.1, distance_tolerance = None):

    from math import pi
    from .matrix import inner_product, cross_product, norm
    dtol = tolerance if distance_tolerance is None else distance_tolerance

    axis1, point1, angle1, shift1 = a.axis_center_angle_shift()
    axis2, point2, angle2, shift2 = b.axis_center_angle_shift()
    angle1 *= pi/180
    angle2 *= pi/180

    if angle1 < tolerance or angle2 < tolerance:
        if angle1 >= tolerance or angle2 >= tolerance:
            return False
        # Both nearly pure translations, axis is not defined.
        d = a.translation() - b.translation()
        return norm(d) <= dtol

    if abs(angle1 - angle2) > tolerance:
        return False

    if norm(cross_product(axis1, axis2)) > tolerance:
        return False

    if angle1 > pi - tolerance and angle2 > pi - tolerance:
        # Half turn axis sign is arbitrary, so is the sign of the shift.
        shift1, shift2 = abs(shift1), abs(shift2)
    if abs(shift1 - shift2) > dtol:
        return False

    # Distance between the two nearly parallel axis lines.
    dp = [x2 - x1 for x1, x2 in zip(point1, point2)]
    along = inner_product(dp, axis1)
    perp = [x - along*u for x, u in zip(dp, axis1)]
    return norm(perp) <= dtol
