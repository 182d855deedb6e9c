"""haikuforge error types."""


class HaikuForgeError(Exception):
    """Base error for all haikuforge failures."""


class PatternError(HaikuForgeError, ValueError):
    """Invalid syllable count, target or pattern passed by the caller."""


class LexiconError(HaikuForgeError):
    """Syllable lexicon could not be read or written."""


class LexiconVersionError(LexiconError):
    """Manifest version mismatch."""


class LexiconChecksumError(LexiconError):
    """File checksum verification failed."""
