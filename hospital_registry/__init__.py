"""
Hospital Registry

A FastAPI-based application keeping an in-memory roster of a hospital's
doctors and patients, with name and specialization search and live counts.
"""

__version__ = "1.0.0"
