"""Hour-by-hour simulation of spaceships carrying passengers between planets with their own calendars."""

__version__ = "1.0.0"