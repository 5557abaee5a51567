"""spent - currency display settings for the spent expense tracker."""

__version__ = "1.0.0"
