"""
Extractors for WordPress export files.

This subpackage provides read-only navigation over a WXR export and the
functions that turn its items into ordered post types, normalized post
records and discovered images.
"""
