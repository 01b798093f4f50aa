"""Library layer: command registry/resolver and ambient helpers."""
