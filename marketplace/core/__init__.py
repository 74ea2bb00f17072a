"""Core building blocks shared by the server: logging, database layer and models."""
