"""
Shared compute infrastructure for PyLinalg.

IMPORTANT: This is NOT where the public API lives. Vector, Matrix and the
reduction solvers wrap these kernels. This module contains shared NUMERIC
infrastructure only.

Submodules:
    linalg: Elimination kernels
"""
