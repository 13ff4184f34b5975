"""
Test suite for the quotepress package.
"""
