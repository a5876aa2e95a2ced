"""
PR Title Labeler

A webhook handler that labels GitHub pull requests and welcomes their authors
when the pull request title follows the ``type(feature):`` contribution convention.
"""

__version__ = "1.0.0"
