# This project was developed with assistance from AI tools.
"""Credit quote API: products, financing terms and payment quotes."""

__version__ = "0.1.0"
