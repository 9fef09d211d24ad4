"""Core building blocks shared across neo-realms features."""
