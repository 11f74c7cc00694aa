import re
import logging
from logging import Logger
from typing import Any, Callable, Iterable, List, Mapping, Sequence

import pandas as pd

logging.basicConfig(format="%(asctime)s | %(levelname)s | %(funcName)s | %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S")
extractor_logger = logging.getLogger(__name__)
extractor_logger.setLevel(logging.DEBUG)

NON_ALPHA = re.compile(r"[^a-zA-Z\s]")


def contains_substring(substring: str) -> Callable[[str], bool]:
    def predicate(token: str) -> bool:
        return substring in token
    return predicate


def unique(tokens: Iterable[str]) -> List[str]:
    """ Drop repeated tokens, keeping the order of first occurrence """
    return list(dict.fromkeys(tokens))


class WordExtractor(object):
    """ Turns tabular rows into a vocabulary of lowercase words
    """

    def __init__(self,
                 csv_reader: Callable = pd.read_csv,
                 pattern: re.Pattern = NON_ALPHA,
                 logger: Logger = extractor_logger):
        self._csv_reader = csv_reader
        self._pattern = pattern
        self._logger = logger

    def load_rows(self, path: str) -> List[dict]:
        data_frame = self._csv_reader(path)
        self._logger.info(f"Loaded {len(data_frame)} rows from {path}")
        return data_frame.to_dict(orient="records")

    def tokenize(self, text: Any) -> List[str]:
        if not isinstance(text, str):
            return []
        return self._pattern.sub(" ", text.lower()).split()

    def tokenize_rows(self, rows: Sequence[Mapping], field: str) -> List[List[str]]:
        return [self.tokenize(row.get(field)) if isinstance(row, Mapping) else []
                for row in rows]

    def extract(self, rows: Sequence[Mapping], field: str) -> List[str]:
        return unique(token
                      for tokens in self.tokenize_rows(rows, field)
                      for token in tokens)

    def subset(self, rows: Sequence[Mapping], field: str, keyword: str) -> List[str]:
        """ Words of the rows that contain `keyword` as a whole word """
        return unique(token
                      for tokens in self.tokenize_rows(rows, field)
                      if keyword in tokens
                      for token in tokens)

    def classify(self, vocabulary: Iterable[str], predicate: Callable[[str], bool]) -> List[str]:
        return [token for token in vocabulary if predicate(token)]
