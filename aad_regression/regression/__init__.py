# regression/__init__.py
from .linear_regression import LinearRegression, polynomial_basis

__all__ = ["LinearRegression", "polynomial_basis"]
