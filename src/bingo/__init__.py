"""bingo - a personal executable registry."""
