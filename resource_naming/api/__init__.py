"""HTTP preview surface for the naming core."""
