"""BLOGLIST

A small blog-publishing service. Users register and log in, publish posts with
a title, author and URL, like posts, and delete the posts they own. Listings
are ranked by like count.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
