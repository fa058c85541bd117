"""Frontend interfaces for the duel."""
