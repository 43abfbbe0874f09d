"""
Reconciliation of discovered images with collected posts.
"""

from .image_merger import merge_images_into_posts

__all__ = ["merge_images_into_posts"]
