"""Platform settings service: global settings record, partial updates, branding assets."""

__version__ = "0.1.0"
