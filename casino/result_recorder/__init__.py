"""Recorders for the rounds emitted by a casino run."""
