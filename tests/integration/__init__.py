"""
Integration tests for scopelog under concurrency.

Exercises threads, asyncio tasks and real files together without mocks.
"""
