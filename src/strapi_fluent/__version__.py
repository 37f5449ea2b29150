"""Version information for strapi-fluent."""

__version__ = "0.1.0"
