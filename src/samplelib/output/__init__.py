"""Output layer: renders Results for humans (Rich) or machines (JSON)."""
