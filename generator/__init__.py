"""OpenAPI-to-code generator for the namabar endpoint methods."""
