"""Provider service answering ``GET /provider.json``."""
