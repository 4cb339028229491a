"""Shell services: arguments, registry, help and evaluation."""
