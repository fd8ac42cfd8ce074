"""A desktop contact book: an in-memory contact list, a Tk window, file storage and an event log."""

__version__ = "1.0.0"