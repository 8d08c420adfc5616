"""Wire protocol value types."""
