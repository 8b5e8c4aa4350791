"""
dentist_finder - lists in-network dentists sorted by distance from home.

Fetches the Hospital Alemán provider directory, geocodes every address with
Google and prints the providers nearest-first.
"""

__version__ = "1.0.0"
