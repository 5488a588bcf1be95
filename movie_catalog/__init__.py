"""
Movie Catalog Application Package.

This package contains the catalog store, the REST API built on top of it,
and the Streamlit browser client.
"""

__version__ = "1.0.0"
