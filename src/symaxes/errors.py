# vim: set expandtab ts=4 sw=4:

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

"""
errors: define symmetry axes errors
===================================

"""

class SymmetryAxesError(Exception):
    """Base class for errors raised by the symmetry axes code"""
    pass

class InvalidArgumentError(SymmetryAxesError, ValueError):
    """Caller provided a malformed axis, superposition or repeat count"""
    pass

class SymmetryIndexError(SymmetryAxesError, IndexError):
    """Symmetry axis index or repeat index that was never assigned"""
    pass
