"""Application layer: services orchestrating the core and boundary layers."""
