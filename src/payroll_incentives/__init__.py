"""Payroll Incentives package.

Allocates an incentive rate across worked shifts. The package is organized by
feature modules (shifts, rules, distribution, ...) with a thin Flask
controller layer on top of plain service classes.
"""
