"""Feature modules for neo-realms."""
