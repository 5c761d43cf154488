import logging
logger = logging.getLogger()

def iter_matches(matcher, lines):
    """
    yield each line that passes the matcher, uppercased, in source order
    """
    for line in lines:
        word = line.rstrip('\r\n')

        if matcher.match(word):
            yield word.upper()

def scan(matcher, lines):
    return list(iter_matches(matcher, lines))

def find_potential_words(matcher, dictpath):
    """
    scan a dictionary file, one word per line

    undecodable bytes become U+FFFD so those lines never match. the file
    is always closed, read errors propagate to the caller
    """
    with dictpath.open(encoding='utf-8', errors='replace') as lines:
        words = scan(matcher, lines)

    logger.debug(f"{dictpath} has {len(words)} potential words")
    return words
