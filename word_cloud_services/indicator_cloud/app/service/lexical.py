import logging
from logging import Logger
from typing import Callable

import nltk
from nltk.corpus import wordnet

logging.basicConfig(format="%(asctime)s | %(levelname)s | %(funcName)s | %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S")
lexical_logger = logging.getLogger(__name__)
lexical_logger.setLevel(logging.DEBUG)


class WordNetVerbClassifier(object):
    """ Tells whether WordNet knows a verb sense of a word

    Usage:
        is_verb = WordNetVerbClassifier()
        is_verb("rate")
        #> True
    """

    def __init__(self,
                 corpus=wordnet,
                 downloader: Callable = nltk.download,
                 logger: Logger = lexical_logger):
        self._corpus = corpus
        self._downloader = downloader
        self._logger = logger
        self._corpus_ready = False

    def _ensure_corpus(self):
        if self._corpus_ready:
            return
        try:
            self._corpus.synsets("test")
        except LookupError:
            self._logger.info("Downloading NLTK wordnet...")
            downloaded = all([self._downloader("wordnet", quiet=True),
                              self._downloader("omw-1.4", quiet=True)])
            if not downloaded:
                self._logger.warning("NLTK wordnet download did not complete")
            try:
                self._corpus.synsets("test")
            except LookupError as e:
                raise LookupError("WordNet corpus is unavailable, run nltk.download(\"wordnet\")") from e
        self._corpus_ready = True

    def __call__(self, word: str) -> bool:
        self._ensure_corpus()
        return len(self._corpus.synsets(word, pos=self._corpus.VERB)) > 0
