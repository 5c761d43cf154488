import click
from click.testing import CliRunner

from wordlehelper import __version__
from wordlehelper.helperui import cli
from wordlehelper.matcher import WORD_FORMAT_ERROR, KNOWN_LETTERS_FORMAT_ERROR, EXCLUDED_LETTERS_FORMAT_ERROR

def invoke(*args, **kw):
    runner = CliRunner()
    return runner.invoke(cli, list(args), **kw)

def test_potential_words(make_dict):
    dictpath = make_dict(['canoe', 'crabs', 'spams', 'tacos'])
    result = invoke('-w', '????s', '-k', 'a', '-e', 'e', '-d', str(dictpath))

    assert result.exit_code == 0, result.output
    output = click.unstyle(result.output)
    assert f"wordlehelper {__version__}" in output
    assert 'Potential Words: 3' in output
    assert 'CRABS SPAMS TACOS' in output
    assert 'CANOE' not in output

def test_zero_matches(make_dict):
    dictpath = make_dict(['apple'])
    result = invoke('--word', 'zzzzz', '--dictionary-file', str(dictpath))

    assert result.exit_code == 0
    assert 'Potential Words: 0' in click.unstyle(result.output)

def test_shows_inputs(make_dict):
    dictpath = make_dict(['apple'])
    result = invoke('-w', 'a??le', '-k', 'p', '-d', str(dictpath))

    output = click.unstyle(result.output)
    assert 'Word: A _ _ L E' in output
    assert 'Known Letters: P' in output
    assert 'Excluded Letters: None' in output
    assert f"Dictionary File: {dictpath}" in output

def test_dictionary_from_env(make_dict):
    dictpath = make_dict(['apple', 'angle'])
    result = invoke('-w', 'an???', env={'WORDLE_DICT': str(dictpath)})

    assert result.exit_code == 0, result.output
    assert 'Potential Words: 1' in click.unstyle(result.output)

def test_bad_word(make_dict):
    dictpath = make_dict(['apple'])

    for word in ['a??l', 'a??les', 'a1?le']:
        result = invoke('-w', word, '-d', str(dictpath))
        assert result.exit_code != 0
        assert WORD_FORMAT_ERROR in result.output
        assert 'Potential Words' not in result.output

def test_bad_known_letters(make_dict):
    dictpath = make_dict(['apple'])
    result = invoke('-w', '?????', '-k', 'aA', '-d', str(dictpath))

    assert result.exit_code != 0
    assert KNOWN_LETTERS_FORMAT_ERROR in result.output

def test_bad_excluded_letters(make_dict):
    dictpath = make_dict(['apple'])
    result = invoke('-w', '?????', '-e', 'x!', '-d', str(dictpath))

    assert result.exit_code != 0
    assert EXCLUDED_LETTERS_FORMAT_ERROR in result.output

def test_missing_word(make_dict):
    dictpath = make_dict(['apple'])
    result = invoke('-d', str(dictpath))
    assert result.exit_code != 0

def test_missing_dictionary(tmp_path):
    result = invoke('-w', '?????', '-d', str(tmp_path / 'missing.txt'))
    assert result.exit_code != 0

def test_unreadable_dictionary(make_dict, monkeypatch):
    dictpath = make_dict(['apple'])

    def broken(matcher, dictpath):
        raise PermissionError(13, 'Permission denied')

    monkeypatch.setattr('wordlehelper.helperui.find_potential_words', broken)
    result = invoke('-w', '?????', '-d', str(dictpath))

    assert result.exit_code == 1
    assert 'Permission denied' in result.output

def test_version():
    result = invoke('--version')
    assert result.exit_code == 0
    assert __version__ in result.output

def test_dictionary_with_undecodable_bytes(tmp_path):
    dictpath = tmp_path / 'latin1.txt'
    dictpath.write_bytes(b'apple\ncaf\xe9s\nangle\n')
    result = invoke('-w', '?????', '-d', str(dictpath))

    assert result.exit_code == 0, result.output
    output = click.unstyle(result.output)
    assert 'Potential Words: 2' in output
    assert 'APPLE ANGLE' in output

def test_non_ascii_word_rejected(make_dict):
    dictpath = make_dict(['abcds'])
    result = invoke('-w', 'abcdß', '-d', str(dictpath))

    assert result.exit_code == 2
    assert WORD_FORMAT_ERROR in result.output
