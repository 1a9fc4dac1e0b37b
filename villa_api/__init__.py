"""Magic Villa API: CRUD service for villas."""
