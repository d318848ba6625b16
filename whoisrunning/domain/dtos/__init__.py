"""Domain DTOs."""
