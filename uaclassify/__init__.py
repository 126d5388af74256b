"""uaclassify - rule-based user agent classification."""

__version__ = "0.1.0"
