__version__ = "20251019"
