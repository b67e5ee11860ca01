"""File system tree rendering with configurable filter rules.

This module provides classes for walking directory structures and rendering
them as trees, with support for filtering entries, limiting depth and
annotating sizes.
"""
