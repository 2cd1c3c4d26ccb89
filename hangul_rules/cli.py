"""
command line demo: print a sentence's views before and after the sound-change rules
"""

import logging
import sys
from argparse import ArgumentParser, Namespace
from typing import Optional, TextIO

from hangul_rules.domain.errors import RuleLookupError
from hangul_rules.domain.sentence import KoreanSentence
from hangul_rules.services.examples_repository import ExamplesRepository
from hangul_rules.services.settings_store import VIEWS, SettingsStore

logger = logging.getLogger(__name__)

_TITLES = {
    "roman": "Roman",
    "jamo": "Jamo",
    "hangul": "Hangul",
}


def render(sentence: KoreanSentence, views: list[str]) -> str:
    renderers = {
        "roman": sentence.roman,
        "jamo": sentence.jamo,
        "hangul": sentence.hangul_string,
    }
    lines = []
    for view in views:
        lines.append("[{}]".format(_TITLES[view]))
        lines.append(renderers[view]())
    return "\n".join(lines)


def display(text: str, views: list[str], out: TextIO) -> None:
    sentence = KoreanSentence(text)
    print(render(sentence, views), file=out)
    print(render(sentence.apply_rules(), views), file=out)


def run(args: Namespace,
        store: SettingsStore,
        out: Optional[TextIO] = None,
        repository: Optional[ExamplesRepository] = None) -> int:
    """
    Returns:
        process exit status
    """
    if out is None:
        out = sys.stdout
    views = args.view or store.get_views()
    if args.examples:
        if repository is None:
            repository = ExamplesRepository()
        texts = [item.text for item in repository.items]
        if not texts:
            logger.warning("no examples found in %s", repository.data_path)
    else:
        texts = [args.text or store.get_sentence()]

    status = 0
    for text in texts:
        try:
            display(text, views, out)
        except RuleLookupError as e:
            logger.error("cannot apply rules to %r: %s", text, e)
            status = 1
    return status


def main(argv: Optional[list[str]] = None) -> int:
    parser = ArgumentParser(description="Hangul romanization and sound-change rules demo")
    parser.add_argument("text", nargs="?", help="sentence to process <default: from settings>")
    parser.add_argument("--settings", help="settings file <default: settings.yaml>", metavar="FILE")
    parser.add_argument("--view", help="view to print (repeatable) <default: from settings>",
                        action="append", choices=VIEWS)
    parser.add_argument("--examples", help="process every sentence in data/examples.yaml", action="store_true")
    parser.add_argument("--debug", help="enable debug", action="store_true")
    args = parser.parse_args(argv)

    store = SettingsStore(args.settings)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=store.get_log_level())

    return run(args, store)


if __name__ == "__main__":
    sys.exit(main())
