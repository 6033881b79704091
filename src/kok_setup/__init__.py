"""kok-setup — interactive installer for the kok shell assistant."""

__version__ = "0.1.0"
