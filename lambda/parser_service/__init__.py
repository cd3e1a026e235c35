from .parser import parse_response, parse_entry, split_language, LANGUAGE_PREFIX, PREFIXES

__all__ = ['parse_response', 'parse_entry', 'split_language', 'LANGUAGE_PREFIX', 'PREFIXES']
