"""Errors raised by the pipeline stages. Each one aborts the run."""


class WineQualityError(Exception):
    """Base class for every pipeline failure."""


class ParseError(WineQualityError, ValueError):
    """Malformed CSV, or a cell that does not fit the inferred column type."""


class FileError(ParseError):
    """Input file is missing or cannot be read."""


class SchemaError(WineQualityError, ValueError):
    """Expected column is absent or has the wrong type."""


class ConversionError(WineQualityError, ValueError):
    """A cell could not be converted to the numeric array type."""


class ConvergenceError(WineQualityError, RuntimeError):
    """Optimizer produced non-finite coefficients or had nothing to fit."""
