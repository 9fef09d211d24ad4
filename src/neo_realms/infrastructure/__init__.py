"""Host framework integrations for neo-realms."""
