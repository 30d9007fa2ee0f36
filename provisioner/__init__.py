"""Administrator account provisioning for the panel user store."""

__version__ = "0.1.0"
