# This project was developed with assistance from AI tools.
"""Request and response models."""
