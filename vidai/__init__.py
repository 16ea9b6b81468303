"""
VIDAI - Video AI Batch Submission Tool

A CLI application that asks Cloudinary to run AI chaptering, transcription
and translation on uploaded videos, one at a time or in concurrent batches.
"""

__version__ = "1.0.0"
