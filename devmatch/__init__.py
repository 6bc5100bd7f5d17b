"""DevMatch: developer profile assessment and job matching."""

__version__ = "0.1.0"
