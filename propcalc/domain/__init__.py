"""Domain models, calculators and presets."""
