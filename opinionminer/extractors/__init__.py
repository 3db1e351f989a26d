from .text import TextExtractor

__all__ = ['TextExtractor']
