"""Custom errors for the AAD regression package."""


class AADError(Exception):
    pass


class ShapeMismatchError(AADError, ValueError):
    """Two non-deterministic random variables with different path counts were combined."""


class TapeMismatchError(AADError, ValueError):
    """Differentiable random variables recorded on different tapes were combined."""


class SingularRegressionWarning(RuntimeWarning):
    """The regression design matrix could not be conditioned; a degenerate solution was returned."""
