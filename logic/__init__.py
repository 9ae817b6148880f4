"""Game rules: coordinates, placement, shots, bot targeting and match flow."""
