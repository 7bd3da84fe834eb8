"""Country Directory - annuaire des pays / country directory REST service."""

__version__ = "0.1.0"
