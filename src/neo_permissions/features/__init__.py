"""Feature modules for neo-permissions."""
