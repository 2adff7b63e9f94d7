# aad/core/config.py
"""
Configuration of the differentiable random variable factory.

The options control how the reverse pass treats the derivative of the
indicator in `choose`, which is a Dirac delta:

    d/dX [ Y * 1{X >= 0} + Z * 1{X < 0} ] = (Y - Z) * delta(X)
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple


class DiracDeltaApproximationMethod(Enum):
    DIRECT = "DIRECT"
    REGRESSION_ON_DISTRIBUTION = "REGRESSION_ON_DISTRIBUTION"

    @classmethod
    def parse(cls, value) -> "DiracDeltaApproximationMethod":
        if isinstance(value, cls):
            return value
        name = str(value).strip().upper()
        if name == "REGRESSION_ON_DISTRIBUITON":
            # Spelling used by older property maps
            name = "REGRESSION_ON_DISTRIBUTION"
        try:
            return cls[name]
        except KeyError:
            raise ValueError(
                f"Unknown Dirac delta approximation method {value!r}. "
                f"Expected one of {[m.name for m in cls]}"
            ) from None


# Camel-case keys of the loose property map -> AADConfig field names
_PROPERTY_KEYS = {
    "diracDeltaApproximationWidthPerStdDev": "dirac_delta_approximation_width_per_std_dev",
    "diracDeltaApproximationMethod": "dirac_delta_approximation_method",
    "diracDeltaApproximationDensityRegressionWidthPerStdDev":
        "dirac_delta_approximation_density_regression_width_per_std_dev",
    "densityRegressionStepPerStdDev": "density_regression_step_per_std_dev",
    "densityRegressionPowers": "density_regression_powers",
}


@dataclass(frozen=True)
class AADConfig:
    """
    Immutable AAD configuration.

    Attributes
    ----------
    dirac_delta_approximation_width_per_std_dev : float
        Width of the localisation window around X = 0, in multiples of the
        standard deviation of X. 0 gives the true (zero) derivative of the
        step, +inf gives a flat weight of one on every path.
    dirac_delta_approximation_method : DiracDeltaApproximationMethod
        DIRECT (localizer / width) or REGRESSION_ON_DISTRIBUTION (localizer
        conditional expectation times a regressed density).
    dirac_delta_approximation_density_regression_width_per_std_dev : float
        Half-width of the window sweep used to regress the density of X.
    density_regression_step_per_std_dev : float
        Spacing of the window sweep.
    density_regression_powers : tuple of int
        Powers of the window offset used as regression basis for the density.
    """

    dirac_delta_approximation_width_per_std_dev: float = 0.05
    dirac_delta_approximation_method: DiracDeltaApproximationMethod = DiracDeltaApproximationMethod.DIRECT
    dirac_delta_approximation_density_regression_width_per_std_dev: float = 0.5
    density_regression_step_per_std_dev: float = 0.01
    density_regression_powers: Tuple[int, ...] = (0, 1)

    def __post_init__(self) -> None:
        # Frozen dataclass: normalise through object.__setattr__
        object.__setattr__(
            self, "dirac_delta_approximation_method",
            DiracDeltaApproximationMethod.parse(self.dirac_delta_approximation_method),
        )
        object.__setattr__(
            self, "density_regression_powers",
            tuple(int(p) for p in self.density_regression_powers),
        )

        width = float(self.dirac_delta_approximation_width_per_std_dev)
        if math.isnan(width) or width < 0.0:
            raise ValueError(f"Dirac delta approximation width must be >= 0, got {width}")
        density_width = float(self.dirac_delta_approximation_density_regression_width_per_std_dev)
        if not (density_width > 0.0 and math.isfinite(density_width)):
            raise ValueError(f"Density regression width must be positive and finite, got {density_width}")
        step = float(self.density_regression_step_per_std_dev)
        if not (0.0 < step <= density_width):
            raise ValueError(
                f"Density regression step must be in (0, {density_width}], got {step}"
            )
        powers = self.density_regression_powers
        if len(powers) == 0 or min(powers) < 0 or len(set(powers)) != len(powers):
            raise ValueError(
                f"Density regression powers must be distinct non-negative integers, got {powers}"
            )

    @property
    def is_infinite_width(self) -> bool:
        return math.isinf(self.dirac_delta_approximation_width_per_std_dev)

    @classmethod
    def from_properties(cls, properties: Dict[str, Any]) -> "AADConfig":
        """
        Build a config from a key/value property map, e.g.
            {"diracDeltaApproximationWidthPerStdDev": 0.05,
             "diracDeltaApproximationMethod": "REGRESSION_ON_DISTRIBUTION"}
        Snake-case field names are accepted as well.
        """
        kwargs = {}
        for key, value in properties.items():
            field = _PROPERTY_KEYS.get(key, key)
            if field not in cls.__dataclass_fields__:
                raise ValueError(f"Unknown AAD property {key!r}")
            kwargs[field] = value
        return cls(**kwargs)
