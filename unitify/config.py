"""Global configuration and type definitions for the measurement calculator.

This module provides centralized configuration constants and fundamental type
definitions used throughout Unitify. It establishes the numeric types accepted
by the unit model, the operator symbols understood by the expression
evaluator, and the defaults used by the file-processing, reporting and
generator collaborators.

Every value here is a plain module-level constant. Nothing in the package
mutates them at runtime; the command-line interface overrides the relevant
ones through its own flags instead.

Type Definitions:
    Number: Union type defining acceptable numeric inputs for magnitudes
            and conversion factors.

Constants:
    MUL_OPERATOR, DIV_OPERATOR: Operators allowed inside compound units.
    ADD_OPERATOR, SUB_OPERATOR: Additive operators for expressions.
    COMPOUND_OPERATORS: Operators that may join compound-unit components.
    EXPRESSION_OPERATORS: Every binary operator accepted in an expression.
    DEFAULT_REPORT_FILE: File written by the CLI when ``--report`` is bare.
    CSV_HEADER: Header row of CSV reports.
    GENERATOR_LINES: Number of lines the random generator writes by default.
    GENERATOR_MAGNITUDE_RANGE: Half-open magnitude range for generated values.
    LOG_LEVEL, LOG_FORMAT: Logging defaults applied by the CLI.

Example:
    >>> from unitify.config import EXPRESSION_OPERATORS
    >>> "*" in EXPRESSION_OPERATORS
    True
"""

Number = int | float

ADD_OPERATOR = "+"
SUB_OPERATOR = "-"
MUL_OPERATOR = "*"
DIV_OPERATOR = "/"

COMPOUND_OPERATORS = frozenset({MUL_OPERATOR, DIV_OPERATOR})
EXPRESSION_OPERATORS = frozenset({ADD_OPERATOR, SUB_OPERATOR, MUL_OPERATOR, DIV_OPERATOR})

COMMENT_PREFIX = "#"

DEFAULT_REPORT_FILE = "measurement_report.txt"
CSV_HEADER = ("Magnitude", "Unit")

# A Martian year is 687 Earth days.
GENERATOR_LINES = 687
GENERATOR_MAGNITUDE_RANGE = (1.0, 1000.0)

LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
