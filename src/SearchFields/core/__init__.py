"""Field value model: value kinds, classification and the field container."""
