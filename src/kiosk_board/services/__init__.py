"""
Shared service plumbing.

- http.py - pre-configured ``requests.Session`` with a default timeout
"""
