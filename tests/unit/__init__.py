"""
Unit tests for individual scopelog modules.

Each test module corresponds to a source module and exercises its
public interface with in-memory handlers.
"""
