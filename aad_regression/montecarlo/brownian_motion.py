"""
Time discretization and Brownian increments for Monte Carlo simulation.
"""

import numpy as np
from scipy.stats import norm

from ..stochastic.random_variable import RandomVariable

# Keep stratified uniforms away from 0 and 1 before the inverse normal CDF
UNIFORM_CLIP = 1e-12


class TimeDiscretization:
    """Equidistant time grid t_i = initial + i * delta_t, i = 0..n."""

    def __init__(self, initial: float, number_of_time_steps: int, delta_t: float):
        if number_of_time_steps < 1:
            raise ValueError(f"number_of_time_steps must be >= 1, got {number_of_time_steps}")
        if delta_t <= 0:
            raise ValueError(f"delta_t must be positive, got {delta_t}")
        self.times = initial + np.arange(number_of_time_steps + 1) * delta_t

    @property
    def number_of_time_steps(self) -> int:
        return len(self.times) - 1

    def get_time(self, time_index: int) -> float:
        return float(self.times[time_index])

    def get_time_step(self, time_index: int) -> float:
        return float(self.times[time_index + 1] - self.times[time_index])

    def get_time_index(self, time: float) -> int:
        """Index of `time` on the grid; raises ValueError if it is not a grid point."""
        matches = np.flatnonzero(np.isclose(self.times, time, rtol=0.0, atol=1e-12))
        if len(matches) == 0:
            raise ValueError(f"Time {time} is not part of the time discretization")
        return int(matches[0])


class BrownianMotion:
    """
    Brownian increments dW(t_i) for every time step, factor and path.

    Increments are drawn once, on first use, from numpy's default generator
    seeded with `seed`. With `stratified=True` the underlying uniforms are
    Latin-hypercube stratified (one draw per 1/N stratum in every dimension)
    before the inverse normal CDF is applied.
    """

    def __init__(self, time_discretization: TimeDiscretization, number_of_factors: int,
                 number_of_paths: int, seed: int, stratified: bool = False):
        if number_of_factors < 1:
            raise ValueError(f"number_of_factors must be >= 1, got {number_of_factors}")
        if number_of_paths < 1:
            raise ValueError(f"number_of_paths must be >= 1, got {number_of_paths}")
        self.time_discretization = time_discretization
        self.number_of_factors = number_of_factors
        self.number_of_paths = number_of_paths
        self.seed = seed
        self.stratified = stratified
        self._increments = None

    def _generate(self) -> np.ndarray:
        n_steps = self.time_discretization.number_of_time_steps
        shape = (n_steps, self.number_of_factors, self.number_of_paths)
        rng = np.random.default_rng(self.seed)

        if self.stratified:
            dimensions = n_steps * self.number_of_factors
            strata = np.tile(np.arange(self.number_of_paths), (dimensions, 1))
            strata = rng.permuted(strata, axis=1)
            uniforms = (strata + rng.random(strata.shape)) / self.number_of_paths
            uniforms = np.clip(uniforms, UNIFORM_CLIP, 1.0 - UNIFORM_CLIP)
            normals = norm.ppf(uniforms).reshape(shape)
        else:
            normals = rng.standard_normal(shape)

        sqrt_dt = np.sqrt(np.diff(self.time_discretization.times))
        return normals * sqrt_dt[:, None, None]

    def get_brownian_increment(self, time_index: int, factor: int) -> RandomVariable:
        """Increment W(t_{i+1}) - W(t_i), measurable at t_{i+1}."""
        if self._increments is None:
            self._increments = self._generate()
        return RandomVariable(
            self._increments[time_index, factor],
            time=self.time_discretization.get_time(time_index + 1),
        )

    def get_brownian_motion(self, time_index: int, factor: int) -> RandomVariable:
        """W(t_i) with W(t_0) = 0."""
        value = RandomVariable(0.0, time=self.time_discretization.get_time(0))
        for i in range(time_index):
            value = value.add(self.get_brownian_increment(i, factor))
        return value
