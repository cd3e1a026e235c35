from .validator import validate_word, MIN_WORD_LENGTH, MAX_WORD_LENGTH

__all__ = ['validate_word', 'MIN_WORD_LENGTH', 'MAX_WORD_LENGTH']
