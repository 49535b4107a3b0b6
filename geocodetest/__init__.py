"""
geocodetest: measures the quality of address to coordinate results across
multiple geocoding services.
"""

__version__ = "0.1.0"
