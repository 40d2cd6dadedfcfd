"""Builds the plain inputs the calculators consume: phased income, scenarios, validation."""
