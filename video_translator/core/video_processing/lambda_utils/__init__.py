"""Request parsing, environment checks and status persistence for the function handlers."""
