"""Directory tree scanning with configurable exclusion rules.

This package provides the recursive scanner that renders a directory subtree as
tree lines, together with the policy enum controlling .gitignore handling.
"""
