"""Domain layer: enums and exceptions. No framework or infrastructure imports."""
