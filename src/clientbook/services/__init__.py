"""Service layer — the parser facade and CLI-facing wrappers over it."""
