"""Core building blocks shared across neo-permissions."""
