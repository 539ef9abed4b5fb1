"""Dimensional-analysis calculator for physical measurements.

Unitify parses measurements such as ``"72 km/hr"`` or ``"100 grams"``,
converts them between units of the same dimension, and evaluates
arithmetic expressions over them with standard operator precedence.
Adding or subtracting measurements of different dimensions is rejected;
multiplying or dividing them produces a compound unit.

Framework Components:
    Unit Model (unitify.unit):
        • Mass, Length, Time and Volume unit families with a base unit each
        • CompoundUnit for products and quotients such as ``g / L``
        • UnitRegistry resolving symbols and long names to units

    Measurements (unitify.measurement):
        • Measurement: immutable magnitude with a unit and arithmetic operators
        • UnitConverter: conversion to base units and conversion factors

    Expressions (unitify.expression):
        • ExpressionEvaluator: two-stack precedence evaluation

    Processing (unitify.processing):
        • MeasurementFileProcessor: line-by-line evaluation of expression files
        • StatisticsCalculator, MeasurementValidator, reports and a random
          expression generator

Usage:
    >>> from unitify import Measurement, evaluate
    >>> Measurement(1, "km") + Measurement(500, "m")
    Measurement(1500.0, 'm')
    >>> Measurement(100, "g") / Measurement(2, "L")
    Measurement(50.0, 'g / L')
    >>> evaluate([Measurement(10, "g"), Measurement(5, "g"), Measurement(2, "g")], ["*", "+"])
    Measurement(52.0, 'g')

Command line:
    unitify expressions.txt --sorted --stats
"""

from .errors import (
    DivisionByZero,
    EmptyCompoundUnit,
    IncompatibleUnits,
    InvalidMagnitude,
    MalformedCompoundUnit,
    MalformedExpression,
    ParseError,
    UnitifyError,
    UnknownUnit,
)
from .expression import ExpressionEvaluator, Operator, evaluate
from .measurement import Measurement, UnitConverter
from .unit import CompoundUnit, Dimension, SimpleUnit, Unit, UnitRegistry

__version__ = "0.1.0"

__all__ = [
    "CompoundUnit",
    "Dimension",
    "DivisionByZero",
    "EmptyCompoundUnit",
    "ExpressionEvaluator",
    "IncompatibleUnits",
    "InvalidMagnitude",
    "MalformedCompoundUnit",
    "MalformedExpression",
    "Measurement",
    "Operator",
    "ParseError",
    "SimpleUnit",
    "Unit",
    "UnitConverter",
    "UnitRegistry",
    "UnitifyError",
    "UnknownUnit",
    "evaluate",
]
