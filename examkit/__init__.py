"""Small console tools: chunked line reading, word masking, scanf-style input and backtracking puzzles."""

__version__ = "0.1.0"