"""Core of calclex: error types, vocabulary manifests and the expression tokenizer."""
