"""College basketball player statistics dashboard backend."""
