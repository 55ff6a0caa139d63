import pytest

from tiny_search import pagedir
from tiny_search.index import InvertedIndex

PAGES = [
    pagedir.Webpage("http://example.com/1", 0, "<html><title>Dogs</title> dog dog cat fish</html>"),
    pagedir.Webpage("http://example.com/2", 1, "<p>cat cat bird</p>"),
    pagedir.Webpage("http://example.com/3", 1, "<p>dog bird bird an</p>"),
]


@pytest.fixture
def page_directory(tmp_path):
    """Crawler output with three pages.

    Indexed with the default minimum word length this gives:
        dogs {1: 1}, dog {1: 2, 3: 1}, cat {1: 1, 2: 2}, fish {1: 1}, bird {2: 1, 3: 2}
    """
    directory = tmp_path / "pages"
    directory.mkdir()
    pagedir.init(directory)
    for doc_id, page in enumerate(PAGES, start=1):
        pagedir.save(page, directory, doc_id)
    return directory


def make_index(postings: dict[str, dict[int, int]]) -> InvertedIndex:
    index = InvertedIndex()
    for word, counts in postings.items():
        for doc_id, count in counts.items():
            index.set(word, doc_id, count)
    return index
