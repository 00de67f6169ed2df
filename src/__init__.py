"""
Bank Services - Accounts, Loans and Cards

FastAPI microservices that register customers with bank accounts,
and manage their loans and cards, keyed by mobile number.
"""

__version__ = "0.1.0"
