# Blog Posts Test Suite
"""
Test suite for the Blog Posts API.

Unit-style modules at this level exercise the repository, the database
handle and the app through the FastAPI test client; integration/ drives a
live server over HTTP.
"""
