from __future__ import annotations

# Defaults for Coordinate.is_close
REL_TOL = 1e-9
ABS_TOL = 0.0


def is_close(a: float, b: float, rel_tol: float = REL_TOL, abs_tol: float = ABS_TOL) -> bool:
    """
    Scalar tolerance comparison: ``a`` and ``b`` are close when their
    difference is within ``abs_tol``, or within ``rel_tol`` of either value.
    """
    if rel_tol < 0.0 or abs_tol < 0.0:
        raise ValueError("error tolerances must be non-negative")
    if a == b:
        return True
    diff = abs(b - a)
    return diff <= abs_tol or diff <= rel_tol * max(abs(a), abs(b))
