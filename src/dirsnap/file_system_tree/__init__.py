"""File system tree representation with configurable exclusion rules.

This package builds the ordered, filtered tree of a project directory and
renders it as text.
"""
