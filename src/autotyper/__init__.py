"""autotyper - type commands into a terminal like a human would."""

__version__ = "1.0.0"
