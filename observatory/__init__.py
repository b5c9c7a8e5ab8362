"""Observatory booking service: accounts, availability calendars and bookings."""

__version__ = "0.3.0"
