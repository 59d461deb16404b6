"""Custom exceptions for docoutline."""


class DocOutlineError(Exception):
    """Base exception for docoutline operations."""


class InvalidNodeError(DocOutlineError, TypeError):
    """A raw node does not have the documented tree shape."""


class InvalidDepthError(DocOutlineError, ValueError):
    """Table of contents depth outside 1-3."""
