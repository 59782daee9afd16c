import os
import stat

import pytest

from listingfs.errors import ListingIOError, NotDirectoryError, NotFoundError
from listingfs.fs_operations import EntryKind, FSOperations
from listingfs.listing import load


def test_classify(fs):
    assert fs.classify("/a/b/c.txt") is EntryKind.FILE
    assert fs.classify("/a") is EntryKind.DIRECTORY
    assert fs.classify("/a/c") is EntryKind.DIRECTORY
    assert fs.classify("/") is EntryKind.DIRECTORY
    assert fs.classify("/nonexistent/path") is EntryKind.NOT_FOUND


def test_list_children(fs):
    assert fs.list_children("/a") == ["b", "c"]
    assert fs.list_children("/a/c") == ["e.dat", "f.mp4"]
    assert fs.list_children("/") == ["a"]


def test_list_children_of_file_fails(fs):
    with pytest.raises(NotDirectoryError):
        fs.list_children("/a/b/c.txt")


def test_list_children_of_missing_path_fails(fs):
    with pytest.raises(NotDirectoryError):
        fs.list_children("/missing")


def test_synthesize_content(fs):
    assert fs.synthesize_content("/a/b/c.txt") == b"/a/b/c.txt is in listing.txt"


def test_partial_read_is_clamped(fs):
    content = b"/a/b/c.txt is in listing.txt"
    assert fs.synthesize_content("/a/b/c.txt", offset=5, size=1000) == content[5:]
    assert fs.read("/a/b/c.txt", 3, 2) == b"/b/"
    assert fs.read("/a/b/c.txt", 50, len(content) - 4) == content[-4:]


def test_read_past_end_is_empty(fs):
    size = fs.content_size("/a/b/c.txt")
    assert fs.read("/a/b/c.txt", 10, size) == b""
    assert fs.read("/a/b/c.txt", 10, size + 100) == b""


def test_negative_range_is_rejected(fs):
    with pytest.raises(ValueError):
        fs.read("/a/b/c.txt", 10, -1)


def test_content_of_directory_fails(fs):
    with pytest.raises(NotFoundError):
        fs.synthesize_content("/a")
    with pytest.raises(NotFoundError):
        fs.synthesize_content("/missing")


def test_content_label_defaults_to_listing_file(listing_file):
    fs = FSOperations(listing_file)
    assert fs.synthesize_content("/a/c/e.dat") == f"/a/c/e.dat is in {listing_file}".encode()


def test_content_is_utf8():
    fs = FSOperations("unused", content_label="läst", tree=load(["/ü.txt"]))
    data = fs.synthesize_content("/ü.txt")
    assert data == "/ü.txt is in läst".encode("utf-8")
    assert fs.getattr("/ü.txt")["st_size"] == len(data)


def test_prefix_collision_makes_directory():
    fs = FSOperations("unused", content_label="x", tree=load(["/a", "/a/b"]))
    assert fs.classify("/a") is EntryKind.DIRECTORY
    assert fs.list_children("/a") == ["b"]
    with pytest.raises(NotFoundError):
        fs.synthesize_content("/a")


def test_getattr_file(fs):
    attrs = fs.getattr("/a/b/c.txt")
    assert attrs["st_mode"] == stat.S_IFREG | 0o444
    assert attrs["st_nlink"] == 1
    assert attrs["st_size"] == len(b"/a/b/c.txt is in listing.txt")


def test_getattr_directory(fs):
    attrs = fs.getattr("/a")
    assert stat.S_ISDIR(attrs["st_mode"])
    assert attrs["st_mode"] & 0o777 == 0o755


def test_getattr_missing(fs):
    with pytest.raises(NotFoundError):
        fs.getattr("/a/b/c.txt/d")


def test_readdir(fs):
    entries = fs.readdir("/a/c")
    assert entries[:2] == [".", ".."]
    names = [name for name, _, _ in entries[2:]]
    assert names == ["e.dat", "f.mp4"]
    _, attrs, offset = entries[2]
    assert offset == 0
    assert attrs["st_size"] == fs.content_size("/a/c/e.dat")


def test_readdir_root(fs):
    name, attrs, _ = fs.readdir("/")[2]
    assert name == "a"
    assert stat.S_ISDIR(attrs["st_mode"])


def test_readdir_file_fails(fs):
    with pytest.raises(NotDirectoryError):
        fs.readdir("/a/b/c.txt")


def test_missing_listing_file(tmp_path):
    with pytest.raises(ListingIOError):
        FSOperations(str(tmp_path / "missing.txt"))


def test_reload_publishes_new_tree(fs, listing_file):
    old_tree = fs.tree
    with open(listing_file, "a") as f:
        f.write("/z/new.txt\n")

    fs.reload()

    assert fs.tree is not old_tree
    assert fs.classify("/z/new.txt") is EntryKind.FILE
    assert old_tree.resolve("/z/new.txt") is None


def test_failed_reload_keeps_tree(fs, listing_file):
    old_tree = fs.tree
    os.remove(listing_file)
    with pytest.raises(ListingIOError):
        fs.reload()
    assert fs.tree is old_tree
    assert fs.classify("/a/b/c.txt") is EntryKind.FILE
