"""File system tree representation with configurable exclusion rules.

This package provides the filesystem access layer, binary file detection, and the
tree structure used to render directory listings and to walk files for content
collection.
"""
