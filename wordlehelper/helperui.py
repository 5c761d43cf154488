import pathlib

import click

import logging
logger = logging.getLogger()

from wordlehelper import __version__
from wordlehelper import display
from wordlehelper.matcher import (
    ValidationError,
    compile_matcher,
    validate_word,
    validate_known_letters,
    validate_excluded_letters,
)
from wordlehelper.scanner import find_potential_words
from wordlehelper.utils import dotdict

def validator(func):
    """
    turn a matcher field validator into a click callback

    the user's original value is passed on, the matcher normalizes it again
    """
    def _callback(ctx, param, value):
        if value is None:
            return value

        try:
            func(value)
        except ValidationError as e:
            raise click.BadParameter(e.message, ctx=ctx, param=param) from e

        return value
    return _callback

class HelperUI:

    def __init__(self, args):
        args = dotdict(args)

        self.args    = args
        self.matcher = compile_matcher(args.word, args.known_letters, args.excluded_letters)

    def show_inputs(self):
        display.show_version()
        display.show_word(self.args.word)
        display.show_known_letters(self.args.known_letters)
        display.show_excluded_letters(self.args.excluded_letters)
        display.show_dictionary_file(self.args.dictionary_file)

    def potential_words(self):
        dictpath = self.args.dictionary_file
        logger.debug(f"scanning {dictpath} with {self.matcher!r}")

        try:
            return find_potential_words(self.matcher, dictpath)
        except OSError as e:
            raise click.FileError(str(dictpath), hint=e.strerror or str(e)) from e

    def run(self):
        self.show_inputs()
        words = self.potential_words()
        display.show_potential_words(words, self.args.word, self.args.known_letters)


@click.command()
@click.option('-w', '--word', required=True, callback=validator(validate_word),
              help="the word to get help with, use ? or space for unknown letters")
@click.option('-k', '--known-letters', callback=validator(validate_known_letters),
              help="letters known to be in the word but not their position")
@click.option('-e', '--excluded-letters', callback=validator(validate_excluded_letters),
              help="letters known NOT to be in the word")
@click.option('-d', '--dictionary-file', default='dictionary.txt', envvar='WORDLE_DICT', show_default=True,
              type=click.Path(exists=True, dir_okay=False, readable=True, path_type=pathlib.Path),
              help="dictionary file containing words to check against")
@click.option('-v', '--verbose', is_flag=True, help="show debug logging")
@click.version_option(__version__, prog_name='wordlehelper')
@click.pass_context
def cli(ctx, *_, **args):
    """
    list the dictionary words that fit a Wordle puzzle

    WORD has a letter for each known spot and ? (or a space) for the rest,
    eg. -w 'a??le' -k p -e rst
    """
    logging.basicConfig(format='%(message)s', level=logging.DEBUG if args['verbose'] else logging.INFO)

    try:
        ui = HelperUI(args)
        ui.run()
    except KeyboardInterrupt:
        pass
