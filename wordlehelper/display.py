from rich.console import Console
from rich.markup import escape
print = Console(highlight=False).print

from wordlehelper import __version__
from wordlehelper.utils import normalize_letters, sorted_letters

WORDS_PER_LINE = 10

LETTER_EXACT = 'e' # exact spot
LETTER_KNOWN = 'i' # known to be in word, spot not confirmed
LETTER_PLAIN = 'o' # neither


def classify(word, pattern, known_letters):
    """
    return one LETTER_X code per character of word

    everything is compared uppercase, pattern wildcards never match exactly
    """
    word = word.upper()
    pattern = pattern.upper()
    known = normalize_letters(known_letters)

    codes = []

    for i, c in enumerate(word):
        if i < len(pattern) and c == pattern[i]:
            codes.append(LETTER_EXACT)
        elif c in known:
            codes.append(LETTER_KNOWN)
        else:
            codes.append(LETTER_PLAIN)

    return codes

def colorize(code, text):
    """
    colorize text using rich color tags
    code: a LETTER_X classification
    text: the text to wrap with color tags
    """
    if code == LETTER_EXACT:
        color = 'green'
    elif code == LETTER_KNOWN:
        color = 'bold dark_goldenrod'
    elif code == LETTER_PLAIN:
        return text
    else:
        raise RuntimeError(f"unknown code: {code}")

    return f"[{color}]{text}[/{color}]"

def colorize_word(word, pattern, known_letters):
    word = word.upper()
    return ''.join([
        colorize(code, c)
        for code, c in zip(classify(word, pattern, known_letters), word)
    ])


def show_version():
    print(f"wordlehelper {__version__}\n")

def show_word(word):
    print("            Word: ", end='')
    for c in word:
        if c in ' ?':
            print("[white]_[/white]", end=' ')
        else:
            print(f"[green]{c.upper()}[/green]", end=' ')
    print()

def _show_letters(label, letters, color):
    print(label, end='')

    if letters:
        print(f"[{color}]{' '.join(sorted_letters(letters))}[/{color}]", end='')
    else:
        print("None", end='')
    print()

def show_known_letters(letters):
    _show_letters("   Known Letters: ", letters, 'bold dark_goldenrod')

def show_excluded_letters(letters):
    _show_letters("Excluded Letters: ", letters, 'grey50')

def show_dictionary_file(dictpath):
    print(f"\n Dictionary File: {escape(str(dictpath))}", soft_wrap=True)

def show_potential_words(words, word, known_letters, n=WORDS_PER_LINE):
    print(f"\n Potential Words: {len(words)}\n")

    for i in range(0, len(words), n):
        line = words[i:i + n]
        print(' '.join([colorize_word(w, word, known_letters) for w in line]))

    print()
