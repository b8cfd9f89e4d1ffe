"""Framework-free logic behind the board and reports endpoints."""
