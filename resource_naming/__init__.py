"""Deterministic Azure resource naming for serverless deployments."""

__version__ = "1.0.0"
