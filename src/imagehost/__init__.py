"""Image hosting API with a MongoDB store and a read-through cache."""

__version__ = "0.1.0"
