"""Argon2id credential hashing and verification."""
