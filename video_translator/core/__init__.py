"""Core domain: job lifecycle, stage driver and processing backend."""
