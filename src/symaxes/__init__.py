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

from .place import Place, Places, rotation, translation
from .axes import SymmetryAxes, ElementaryAxis, RepeatRelation
from .axes import AxisRegistry, RepeatTransformTable, RepeatRelationIndex
from .axes import TransformComposer, SymmetryAxisDeriver
from .axes import MIN_DIVISION, EQUIVALENCE_TOLERANCE
from .equivalence import equivalent_axes
from .align import align_points, superposition_transform
from .errors import SymmetryAxesError, InvalidArgumentError, SymmetryIndexError
