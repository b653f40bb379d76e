"""File writers taking the ordered list of comments."""
