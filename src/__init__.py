"""
EazyBank - Accounts, Loans & Cards Services

A FastAPI-based banking demo exposing customer accounts, loans and
cards, with uniform validation and error payloads.
"""

__version__ = "0.1.0"
