"""querylens - SQL query analysis and parameterization engine."""

__version__ = "0.1.0"
