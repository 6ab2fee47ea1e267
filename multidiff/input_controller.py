import logging
import os
import re
from abc import ABC, abstractmethod
from typing import List, Tuple

logger = logging.getLogger(__name__)


class InputParser(ABC):
    """Abstract base class for input parsers."""

    @abstractmethod
    def parse(self, sources: List[str]) -> List[Tuple[str, str]]:
        """
        Reads the source(s) into labelled raw documents.

        Args:
            sources (List[str]): File paths.

        Returns:
            List[Tuple[str, str]]: (label, raw_text) per document, in order.
        """
        pass

    def _read(self, filepath: str) -> str:
        with open(filepath, 'r', encoding='utf-8', errors='ignore', newline='') as f:
            return f.read()


class RawFileParser(InputParser):
    """One document per file, labelled with the file name."""
    def parse(self, sources: List[str]) -> List[Tuple[str, str]]:
        documents = []
        for filepath in sources:
            try:
                documents.append((os.path.basename(filepath), self._read(filepath)))
            except FileNotFoundError:
                logger.warning("File not found: %s", filepath)
        return documents


class CombinedFileParser(InputParser):
    """Parses a single file holding several documents separated by delimiter lines."""
    DELIMITER = re.compile(r'^--- DOCUMENT:\s*(.*?)\s*---$')

    def parse(self, sources: List[str]) -> List[Tuple[str, str]]:
        source = sources[0]
        try:
            text = self._read(source)
        except FileNotFoundError:
            logger.warning("File not found: %s", source)
            return []

        documents = []
        label, body, preamble = None, [], False
        for line in text.replace('\r\n', '\n').split('\n'):
            match = self.DELIMITER.match(line.strip())
            if match:
                if label is not None:
                    documents.append((label, '\n'.join(body)))
                label = match.group(1) or f"Text {len(documents) + 1}"
                body = []
                continue

            if label is None:
                preamble = preamble or bool(line.strip())
            else:
                body.append(line)

        if label is not None:
            documents.append((label, '\n'.join(body)))
        if preamble:
            logger.warning("Ignoring text before the first delimiter in %s", source)
        if not documents:
            logger.warning("No '--- DOCUMENT: <label> ---' delimiters found in %s", source)
        return documents


class InputController:
    """
    Selects a parser for the given sources and loads the documents.
    """

    def load(self, sources: List[str]) -> List[Tuple[str, str]]:
        """
        Args:
            sources (List[str]): One combined file, or one file per document.

        Returns:
            List[Tuple[str, str]]: (label, raw_text) per document.
        """
        if not sources:
            return []
        parser = self._get_parser(sources)
        documents = parser.parse(sources)
        logger.debug("Loaded %d documents with %s", len(documents), type(parser).__name__)
        return documents

    def _get_parser(self, sources: List[str]) -> InputParser:
        if len(sources) > 1: return RawFileParser()
        return CombinedFileParser()
