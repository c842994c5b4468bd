"""
Base classes for the crawler system.

This module provides the abstract crawler interface and the retrieval
errors shared by all crawlers.
"""

from .crawler import BaseCrawler, FetchError, HttpStatusError, TransportError

__all__ = ["BaseCrawler", "FetchError", "HttpStatusError", "TransportError"]
