"""Batch scheduling of video submissions."""
from .batch import BatchScheduler, coerce_concurrency, chunk_identifiers

__all__ = ["BatchScheduler", "coerce_concurrency", "chunk_identifiers"]
