"""Core building blocks: reactive cell, limit types, config."""
