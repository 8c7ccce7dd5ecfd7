"""
Unit tests for Sorter — decides which record of a group is kept.
"""
from twinfinder.core.models import DuplicateGroup, FileRecord, SortOrder
from twinfinder.core.sorter import Sorter


def make_group(*paths):
    return DuplicateGroup(fingerprint="ff", size=1, files=[FileRecord(path=p, size=1) for p in paths])


class TestSorter:

    def test_first_found_leaves_order_untouched(self):
        group = make_group("/z/b.txt", "/a.txt")
        Sorter.sort_files_inside_groups([group], SortOrder.FIRST_FOUND)
        assert [f.path for f in group.files] == ["/z/b.txt", "/a.txt"]

    def test_none_behaves_like_first_found(self):
        group = make_group("/z/b.txt", "/a.txt")
        Sorter.sort_files_inside_groups([group], None)
        assert [f.path for f in group.files] == ["/z/b.txt", "/a.txt"]

    def test_shortest_path_prefers_shallow_files(self):
        group = make_group("/photos/2024/img.jpg", "/photos/img_long_name.jpg", "/photos/x/y.jpg")
        Sorter.sort_files_inside_groups([group], SortOrder.SHORTEST_PATH)
        assert group.files[0].path == "/photos/img_long_name.jpg"

    def test_shortest_path_ties_broken_lexically(self):
        group = make_group("/d/b.txt", "/d/a.txt")
        Sorter.sort_files_inside_groups([group], SortOrder.SHORTEST_PATH)
        assert [f.path for f in group.files] == ["/d/a.txt", "/d/b.txt"]

    def test_shortest_filename(self):
        group = make_group("/a/very_long_filename.jpg", "/a/b/c/d/x.jpg")
        Sorter.sort_files_inside_groups([group], SortOrder.SHORTEST_FILENAME)
        assert group.files[0].path == "/a/b/c/d/x.jpg"

    def test_lexical(self):
        group = make_group("/b", "/a/z", "/a/y")
        Sorter.sort_files_inside_groups([group], SortOrder.LEXICAL)
        assert [f.path for f in group.files] == ["/a/y", "/a/z", "/b"]

    def test_empty_input(self):
        Sorter.sort_files_inside_groups([], SortOrder.LEXICAL)
