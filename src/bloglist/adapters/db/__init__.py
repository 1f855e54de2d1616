"""SQL persistence for BLOGLIST: engine factory, metadata, types, schema and migrations."""
