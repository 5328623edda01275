"""Client for the Maps web service APIs: directions and elevation."""

__version__ = "0.1.0"