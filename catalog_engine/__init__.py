"""
Catalog Engine
==============

Query engine for a fixed, preloaded product catalog.

Features:
- Keyword-rule category inference from product names
- Case-insensitive substring search with category filtering
- Category listing, distribution and price statistics
- Shareable filter state via query-string parameters

"""

__version__ = "1.0.0"
