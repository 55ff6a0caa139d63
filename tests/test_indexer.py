from tiny_search import indexer, indextest, pagedir
from tiny_search.counters import DocCounts
from tiny_search.index import InvertedIndex


def test_index_page():
    index = InvertedIndex()
    page = pagedir.Webpage("http://example.com/", 0, "<b>Home</b> home of the HOME page")
    assert indexer.index_page(index, page, 4) == 5
    assert index.find("home") == DocCounts({4: 3})
    assert index.find("the") == DocCounts({4: 1})
    assert index.find("of") is None


def test_build_index(page_directory):
    index = indexer.build_index(page_directory, show_progress=False)
    assert index.find("dog") == DocCounts({1: 2, 3: 1})
    assert index.find("cat") == DocCounts({1: 1, 2: 2})
    assert index.find("bird") == DocCounts({2: 1, 3: 2})
    assert index.find("dogs") == DocCounts({1: 1})
    assert index.find("an") is None
    assert index.find("html") is None


def test_build_index_min_length(page_directory):
    index = indexer.build_index(page_directory, min_length=2, show_progress=False)
    assert index.find("an") == DocCounts({3: 1})


def test_build_index_skips_unreadable_pages(page_directory, capsys):
    (page_directory / "2").write_text("http://example.com/2\nnot-a-depth\ncat\n")
    index = indexer.build_index(page_directory, show_progress=False)
    assert index.find("cat") == DocCounts({1: 1})
    assert "skipping document 2" in capsys.readouterr().err


def test_main_writes_index(page_directory, tmp_path):
    index_file = tmp_path / "pages.index"
    assert indexer.main([str(page_directory), str(index_file), "--quiet"]) == 0
    index = InvertedIndex.load(index_file)
    assert index.find("fish") == DocCounts({1: 1})
    assert len(index) == 5


def test_main_rejects_non_crawler_directory(tmp_path, capsys):
    assert indexer.main([str(tmp_path), str(tmp_path / "out.index"), "--quiet"]) == 1
    assert "invalid page directory" in capsys.readouterr().err


def test_main_rejects_unwritable_index(page_directory, tmp_path, capsys):
    assert indexer.main([str(page_directory), str(tmp_path / "no" / "such" / "dir.index"), "--quiet"]) == 1
    assert "could not be written" in capsys.readouterr().err


def test_main_leaves_no_file_when_build_fails(page_directory, tmp_path, monkeypatch, capsys):
    def failing_build(*args, **kwargs):
        raise OSError("disk went away")

    monkeypatch.setattr(indexer, "build_index", failing_build)
    index_file = tmp_path / "pages.index"
    assert indexer.main([str(page_directory), str(index_file), "--quiet"]) == 1
    assert not index_file.exists()
    assert "disk went away" in capsys.readouterr().err


def test_main_rejects_directory_as_index(page_directory, tmp_path, capsys):
    assert indexer.main([str(page_directory), str(tmp_path), "--quiet"]) == 1
    assert "could not be written" in capsys.readouterr().err


def test_main_wrong_argument_count(capsys):
    assert indexer.main(["only-one"]) == 1
    assert "usage:" in capsys.readouterr().err


def test_indextest_round_trip(page_directory, tmp_path):
    original = tmp_path / "a.index"
    copy = tmp_path / "b.index"
    assert indexer.main([str(page_directory), str(original), "--quiet"]) == 0
    assert indextest.main([str(original), str(copy)]) == 0
    assert original.read_bytes() == copy.read_bytes()


def test_indextest_errors(tmp_path, capsys):
    assert indextest.main([str(tmp_path / "missing.index"), str(tmp_path / "out.index")]) == 1
    bad = tmp_path / "bad.index"
    bad.write_text("dog one 1\n")
    assert indextest.main([str(bad), str(tmp_path / "out.index")]) == 1
    assert indextest.main([]) == 1
    err = capsys.readouterr().err
    assert "unable to open" in err
    assert "unable to read" in err
