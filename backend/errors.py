# -----------------------------
# Domain Errors
# -----------------------------

class InvalidInputError(ValueError):
    """start or end identifier is missing/empty."""


class InvalidWeightError(ValueError):
    """Edge weight is negative, NaN, infinite or not a number."""
