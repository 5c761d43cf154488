import re
import string

from wordlehelper.utils import normalize_letters

import logging
logger = logging.getLogger()

wordlen = 5

WILDCARDS = ' ?'
LETTERS   = string.ascii_uppercase

# checked before upper(), which maps some non-ascii to ascii, eg. sharp s -> 'SS'
RAW_LETTERS = string.ascii_letters

WORD_FORMAT_ERROR             = "Word must be 5 characters of either A-Z, a-z, ?, or ' '"
KNOWN_LETTERS_FORMAT_ERROR    = "Known letters must be a unique list of A-Z or a-z characters"
EXCLUDED_LETTERS_FORMAT_ERROR = "Excluded letters must be a unique list of A-Z or a-z characters"


class ValidationError(ValueError):

    def __init__(self, field, message):
        super().__init__(message)
        self.field = field
        self.message = message

    def __str__(self):
        return f"{self.field}: {self.message}"


def validate_word(word):
    """
    return the word in uppercase with every wildcard written as '?'
    """
    if word is None or len(word) != wordlen:
        raise ValidationError('word', WORD_FORMAT_ERROR)

    if not all([c in RAW_LETTERS or c in WILDCARDS for c in word]):
        raise ValidationError('word', WORD_FORMAT_ERROR)

    word = word.upper()

    return ''.join(['?' if c in WILDCARDS else c for c in word])

def _validate_letters(field, message, letters, maxlen):
    letters = letters or ''

    if not all([c in RAW_LETTERS for c in letters]):
        raise ValidationError(field, message)

    letters = normalize_letters(letters)

    if not all([
        len(letters) <= maxlen,
        len(set(letters)) == len(letters),  # no repeats, eg. 'aA'
    ]):
        raise ValidationError(field, message)

    return letters

def validate_known_letters(letters):
    return _validate_letters('known_letters', KNOWN_LETTERS_FORMAT_ERROR, letters, wordlen)

def validate_excluded_letters(letters):
    return _validate_letters('excluded_letters', EXCLUDED_LETTERS_FORMAT_ERROR, letters, len(LETTERS))


class Matcher:
    """
    compiled filter for one word/known/excluded triple

    the 5 slots become a single regex, a wildcard slot is any letter that
    is not excluded and a fixed slot is that letter. known letters are a
    separate whole word check since they can already sit in a fixed slot.
    """

    def __init__(self, pattern, known, excluded):
        self._pattern  = pattern
        self._known    = frozenset(known)
        self._excluded = frozenset(excluded)
        self._regex    = re.compile(self.make_regex(pattern, self._excluded), re.IGNORECASE | re.ASCII)

    @property
    def pattern(self):
        return self._pattern

    @property
    def known(self):
        return self._known

    @property
    def excluded(self):
        return self._excluded

    @property
    def regex(self):
        return self._regex

    @staticmethod
    def make_regex(pattern, excluded):
        """
        ?A??E with excluded XZ -> (?![XZ])[A-Z]A(?![XZ])[A-Z](?![XZ])[A-Z]E
        """
        wildcard = '[A-Z]'
        if excluded:
            wildcard = f"(?![{''.join(sorted(excluded))}]){wildcard}"

        return ''.join([wildcard if c == '?' else c for c in pattern])

    def contains_known(self, word):
        word = word.upper()
        return all([c in word for c in self.known])

    def match(self, word):
        return bool(self.regex.fullmatch(word)) and self.contains_known(word)

    def __repr__(self):
        return f"{self.__class__.__name__}({self.pattern!r}, known={''.join(sorted(self.known))!r}, excluded={''.join(sorted(self.excluded))!r})"


def compile_matcher(word, known_letters=None, excluded_letters=None):
    pattern  = validate_word(word)
    known    = validate_known_letters(known_letters)
    excluded = validate_excluded_letters(excluded_letters)

    matcher = Matcher(pattern, known, excluded)
    logger.debug(f"compiled {matcher!r} to regex: {matcher.regex.pattern}")
    return matcher
