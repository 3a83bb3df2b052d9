"""Base layer: wire models, error taxonomy, logging, and validation DTOs."""
