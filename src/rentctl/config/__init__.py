"""Configuration — section models, settings layering, discovery, logging."""
