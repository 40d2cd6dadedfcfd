"""UK pension retirement calculator: projection, income and drawdown engine."""

__version__ = "0.5.0"
