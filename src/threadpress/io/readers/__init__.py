"""File readers returning document text."""
