import pytest

@pytest.fixture
def make_dict(tmp_path):
    """
    write words to a dictionary file, one per line
    """
    def _make_dict(words, name='dictionary.txt'):
        dictpath = tmp_path / name
        dictpath.write_text(''.join([f"{w}\n" for w in words]))
        return dictpath
    return _make_dict
