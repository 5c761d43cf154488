def normalize_letters(letters):
    """
    uppercase a letter string, None is the same as no letters
    """
    return (letters or '').upper()

def sorted_letters(letters):
    return sorted(normalize_letters(letters))

class dotdict(dict):
    """dot.notation access to dictionary attributes"""
    __getattr__ = lambda self, key: self[key]
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__
