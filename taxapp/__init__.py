"""U.S. federal/state take-home tax estimator."""

__version__ = "0.1.0"
