import os
import time
from abc import ABC, abstractmethod
from typing import List, Tuple


class SearchAlgorithm(ABC):
    """
    SearchAlgorithm Abstract Base Class

    This abstract base class defines the interface for exact substring search
    over the lines of a text file. Concrete classes only provide the per-line
    matching; file loading, case folding and the statistics bookkeeping are
    shared here.

    Args:
        file_path (str): Path to the file to be searched
        reread_on_query (bool): Reload the file before each query if it changed
        case_sensitive (bool): When False, lines and patterns are lower-cased

    Attributes:
        file_path (str): Path to the file that will be searched
        reread_on_query (bool): Flag indicating whether to reread the file on each query
        case_sensitive (bool): Flag indicating whether matching is case sensitive

    Abstract Methods:
        _find_in_line(line, pattern):
            Returns (occurrences, alignments, comparisons) for one line.

    Methods:
        search(query):
            Returns every (line_index, offset) pair where query occurs.
        get_stats():
            Returns statistics about the last search operation.
        cleanup():
            Releases the cached file content.
    """
    def __init__(self, file_path: str, reread_on_query: bool = False, case_sensitive: bool = True):
        self.file_path = file_path
        self.reread_on_query = reread_on_query
        self.case_sensitive = case_sensitive
        self._last_modified: float = 0.0
        self._lines: List[str] = []
        self._stats = {
            "comparisons": 0,
            "alignments": 0,
            "lines_processed": 0,
            "search_time": 0.0,
        }
        if not self.reread_on_query:
            self._read_file()

    @abstractmethod
    def _find_in_line(self, line: str, pattern: str) -> Tuple[List[int], int, int]:
        pass

    def _read_file(self) -> None:
        """
        Read the file and load its lines into memory.

        The file is only read again when its modification time moved forward.

        Raises:
            FileNotFoundError: If file_path does not exist.
            RuntimeError: If the file cannot be read.
        """
        try:
            current_mtime = os.path.getmtime(self.file_path)
            if self._lines and current_mtime <= self._last_modified:
                # File hasn't changed, no need to reload
                return
            self._last_modified = current_mtime
        except OSError:
            # Will be handled in the file opening block
            pass

        try:
            with open(self.file_path, 'rb') as file:
                self._lines = [line.rstrip(b'\r\n').decode('latin-1') for line in file]
        except FileNotFoundError:
            raise FileNotFoundError(f"File not found: {self.file_path}")
        except OSError as e:
            raise RuntimeError(f"Error reading file: {e}") from e

    def search(self, query: str) -> List[Tuple[int, int]]:
        """
        Searches for query in every line of the file.

        Args:
            query (str): The pattern to search for

        Returns:
            List[Tuple[int, int]]: (line index, offset in line) of each occurrence,
                in file order.
        """
        start_time = time.perf_counter()
        if self.reread_on_query:
            self._read_file()
        if not self.case_sensitive:
            query = query.lower()

        self._stats["comparisons"] = 0
        self._stats["alignments"] = 0
        self._stats["lines_processed"] = 0

        results: List[Tuple[int, int]] = []
        for line_index, line in enumerate(self._lines):
            if not self.case_sensitive:
                line = line.lower()
            occurrences, alignments, comparisons = self._find_in_line(line, query)
            self._stats["alignments"] += alignments
            self._stats["comparisons"] += comparisons
            self._stats["lines_processed"] += 1
            results.extend((line_index, offset) for offset in occurrences)

        self._stats["search_time"] = time.perf_counter() - start_time
        return results

    def get_stats(self) -> dict:
        return dict(self._stats)

    def cleanup(self) -> None:
        self._lines = []
        self._last_modified = 0.0
